from fastapi import FastAPI, Response
from starlette.routing import Route
from starlette.types import Receive, Scope, Send


class EmptyOk:
    """ASGI endpoint for "/". Starlette routes a non-function endpoint for every method."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await Response(status_code=200)(scope, receive, send)


def create_app() -> FastAPI:
    # No docs/openapi routes, "/" is the only path
    return FastAPI(
        routes=[Route("/", EmptyOk())],
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )


app = create_app()
