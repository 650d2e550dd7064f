"""
Slash command and interactive selection handlers.

Both handlers take the decoded form values of a Slack request and return the
JSON response Slack renders in the channel.
"""

import logging
from typing import Mapping
from fastapi import HTTPException, status
from fastapi.responses import Response
from pydantic import ValidationError
from slappd.slack.models import ActionPayload, Message
from slappd.slack.renderer import render_choices, render_detail
from slappd.untappd.client import UntappdClient, UntappdError

logger = logging.getLogger(__name__)

CALLBACK_ID = "slappd"


def json_response(message: Message) -> Response:
    return Response(content=message.to_json(), media_type="application/json")


class CommandHandler:
    """Handles the /beer slash command: search and offer choices."""
    
    def __init__(self, untappd: UntappdClient, max_results: int = 5):
        self.untappd = untappd
        self.max_results = max_results
    
    async def __call__(self, form: Mapping[str, str]) -> Response:
        search_text = form.get("text")
        if not search_text:
            logger.warning("Missing form value: text")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
        
        try:
            result = await self.untappd.search(search_text)
        except UntappdError as e:
            logger.error(f"Search for '{search_text}' failed: {str(e)}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        logger.info(f"Search for '{search_text}' returned {len(result.items)} beers")
        return json_response(render_choices(result.items, self.max_results, CALLBACK_ID))


class SelectionHandler:
    """Handles a button press on one of the search choices."""
    
    def __init__(self, untappd: UntappdClient):
        self.untappd = untappd
    
    async def __call__(self, form: Mapping[str, str]) -> Response:
        try:
            action = ActionPayload.model_validate_json(form.get("payload") or "")
        except ValidationError as e:
            logger.warning(f"Invalid action json: {str(e)}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
        
        if action.callback_id != CALLBACK_ID:
            logger.warning(f"Invalid callback_id: {action.callback_id}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
        
        if not action.actions:
            logger.warning("Action payload has no actions")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
        
        bid = action.actions[0].value
        try:
            info = await self.untappd.info(bid)
        except UntappdError as e:
            logger.error(f"Beer info for {bid} failed: {str(e)}")
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        
        return json_response(render_detail(info))
