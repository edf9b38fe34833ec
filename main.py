"""
DevOps Pipeline App

Application entry point. Sets up FastAPI app, includes all routes,
and serves them with uvicorn on a fixed port.
"""

import logging
import sys

import uvicorn
from api import router
from config import API_VERSION, HOST, PORT, SERVICE_DESCRIPTION, SERVICE_NAME
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- Logging ---
logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)
logger = logging.getLogger(__name__)

# --- App ---
app = FastAPI(
    title=SERVICE_NAME,
    description=SERVICE_DESCRIPTION,
    version=API_VERSION,
    redirect_slashes=False,
)


# --- Not found handling ---
@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # Only GET and HEAD on / and /health exist; any other method is an unknown route
    if exc.status_code == 405:
        exc = StarletteHTTPException(status_code=404)
    return await http_exception_handler(request, exc)


# --- Include routes ---
app.include_router(router)


# --- Server ---
class Server(uvicorn.Server):
    """uvicorn server that announces itself once the port is bound."""

    async def startup(self, sockets=None):
        # uvicorn exits the process with status 1 if the bind fails
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"App running on port {self.config.port}")
            logger.info(f"Health check: http://localhost:{self.config.port}/health")


def run():
    server = Server(uvicorn.Config(app, host=HOST, port=PORT, log_level="info"))
    server.run()


if __name__ == "__main__":
    run()
