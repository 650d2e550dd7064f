"""
Builds Slack messages from Untappd results.
"""

from typing import Sequence
from slappd.slack.models import Action, Attachment, Message
from slappd.untappd.models import BeerInfo, SearchItem

EMPTY_RESULT_TEXT = "No beers found, try another search."


def new_action(value: str) -> Action:
    return Action(value=value)


def render_empty() -> Message:
    return Message(attachments=[
        Attachment(text=EMPTY_RESULT_TEXT, fallback=EMPTY_RESULT_TEXT)
    ])


def render_choices(items: Sequence[SearchItem], max_results: int, callback_id: str) -> Message:
    """One choice attachment per item, keeping API order and the first max_results."""
    if not items:
        return render_empty()
    
    attachments = []
    for item in items[:max_results]:
        title = item.title()
        attachments.append(Attachment(
            title=title,
            fallback=title,
            callback_id=callback_id,
            actions=[new_action(item.id)]
        ))
    return Message(attachments=attachments)


def render_detail(info: BeerInfo) -> Message:
    title = info.title()
    return Message(attachments=[
        Attachment(
            title=title,
            text=info.text(),
            image_url=info.beer_label,
            fallback=title
        )
    ])
