from typing import Dict
from fastapi import APIRouter, Request
from fastapi.responses import Response
from slappd.auth.middleware import FormHandler
from slappd.auth.signature import RequestSignatureChecker

ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


async def read_form(request: Request, signature: RequestSignatureChecker) -> Dict[str, str]:
    """Query string and form body values, body taking precedence."""
    if signature.enabled:
        signature.verify(await request.body(), request.headers)
    
    values = dict(request.query_params)
    form_data = await request.form()
    values.update({k: v for k, v in form_data.items() if isinstance(v, str)})
    return values


def create_router(
    search_handler: FormHandler,
    select_handler: FormHandler,
    signature: RequestSignatureChecker
) -> APIRouter:
    router = APIRouter(tags=["slack"])
    
    @router.api_route("/", methods=ANY_METHOD)
    async def slash_command(request: Request) -> Response:
        return await search_handler(await read_form(request, signature))
    
    @router.api_route("/select", methods=ANY_METHOD)
    async def select(request: Request) -> Response:
        return await select_handler(await read_form(request, signature))
    
    return router
