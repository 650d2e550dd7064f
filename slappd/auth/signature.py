import logging
from typing import Mapping, Optional, Union
from fastapi import HTTPException, status
from slack_sdk.signature import SignatureVerifier

logger = logging.getLogger(__name__)


class RequestSignatureChecker:
    """Verifies X-Slack-Signature when a signing secret is configured."""
    
    def __init__(self, signing_secret: Optional[str]):
        self.verifier = SignatureVerifier(signing_secret) if signing_secret else None
    
    @property
    def enabled(self) -> bool:
        return self.verifier is not None
    
    def verify(self, body: Union[str, bytes], headers: Mapping[str, str]) -> None:
        if self.verifier is None:
            return
        
        timestamp = headers.get("x-slack-request-timestamp")
        signature = headers.get("x-slack-signature")
        
        try:
            valid = self.verifier.is_valid(body, timestamp, signature)
        except ValueError as e:
            # non-numeric timestamp or a body that is not UTF-8
            logger.warning(f"Unverifiable Slack request: {str(e)}")
            valid = False
        
        if not valid:
            logger.warning("Invalid Slack signature")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
