import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from decoding import decode_body, decode_params
from errors import InvalidRequest, RequestDecodeError
from schemas import RequestBody
from settings import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(title="Chess Board Request Decoder", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_origins] if settings.cors_origins != "*" else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestDecodeError)
async def decode_error_handler(request: Request, exc: RequestDecodeError):
    return JSONResponse(status_code=400, content=exc.to_dict())


@app.get("/healthz")
def healthz():
    return {"ok": True}


@app.get("/image")
def image(request: Request):
    """Validate a single-position request given as query parameters."""
    params = decode_params(request.query_params)
    return params.model_dump(mode="json", by_alias=True)


@app.post("/game")
async def game(request: Request):
    """Validate an animation request given as a JSON body."""
    try:
        data = await request.json()
    except ValueError as e:
        raise InvalidRequest("Request body is not valid JSON") from e
    return decode_body(data).to_wire()


@app.get("/example")
def example():
    return RequestBody.example().to_wire()


def main():
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
