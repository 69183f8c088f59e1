# server/main.py

import logging
import time
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from api import auth, hosts
from config import get_settings
from core.errors import AuthError, ValidationError


logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("hosts_api")

app = FastAPI()


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("%s %s %d %.1fms", request.method, request.url.path, response.status_code, elapsed)
    return response


@app.exception_handler(AuthError)
async def handle_auth_error(request: Request, exc: AuthError):
    return JSONResponse(status_code=401, content={exc.body_key: exc.message})


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content=exc.to_dict())


app.include_router(auth.router)
app.include_router(hosts.router)


def run():
    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
