import logging
from functools import wraps
from typing import Awaitable, Callable, Iterable, Mapping
from fastapi import HTTPException, status
from fastapi.responses import Response

logger = logging.getLogger(__name__)

FormHandler = Callable[[Mapping[str, str]], Awaitable[Response]]

SYSTEM_USER = "slackbot"


class RequestAuthorizer:
    """Gate a slash command handler on Slack's verification token.
    
    Wrapping a handler returns another handler of the same shape, so the gate
    composes explicitly: ``RequestAuthorizer(tokens)(handler)``.
    """
    
    def __init__(self, accepted_tokens: Iterable[str]):
        self.accepted_tokens = frozenset(accepted_tokens)
    
    def __call__(self, handler: FormHandler) -> FormHandler:
        @wraps(handler)
        async def authorized(form: Mapping[str, str]) -> Response:
            if not self.accepted_tokens:
                logger.error("No accepted Slack tokens configured (SLACK_TOKEN)")
                raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
            
            token = form.get("token")
            if not token:
                logger.warning("Missing form value: token")
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
            
            if token not in self.accepted_tokens:
                logger.warning("Rejected request with unknown token")
                raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
            
            user_name = form.get("user_name")
            if not user_name:
                logger.warning("Missing form value: user_name")
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
            
            if user_name == SYSTEM_USER:
                return Response(status_code=status.HTTP_200_OK)
            
            return await handler(form)
        
        return authorized
