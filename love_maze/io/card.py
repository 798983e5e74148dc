import base64
import binascii
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping
from urllib.parse import urlencode, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

SENDER = "sender"
RECIPIENT = "recipient"

DEFAULT_ME = "Romeo"
DEFAULT_YOU = "Juliet"

def encode_data(data: Dict[str, Any]) -> str:
    """JSON -> base64 with the URL-safe alphabet and no '=' padding."""
    raw = json.dumps(data, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

def decode_data(encoded: str) -> Dict[str, Any]:
    padded = encoded + "=" * (-len(encoded) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise ValueError(f"Invalid card data: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Invalid card data: expected an object")
    return data

@dataclass(frozen=True)
class CardState:
    mode: str
    me: str
    you: str
    message: str = ""

    @classmethod
    def default(cls) -> "CardState":
        return cls(SENDER, DEFAULT_ME, DEFAULT_YOU, "")

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "CardState":
        """
        Builds the card from link parameters. An encoded 'data' value wins;
        plain me/you/message only make a recipient card when all three are set.
        """
        obfuscated = params.get("data")
        if obfuscated:
            try:
                decoded = decode_data(obfuscated)
            except ValueError:
                logger.warning("Failed to decode card data, falling back to plain parameters")
            else:
                return cls(
                    RECIPIENT,
                    str(decoded.get("me") or DEFAULT_ME),
                    str(decoded.get("you") or DEFAULT_YOU),
                    str(decoded.get("message") or ""),
                )

        me = (params.get("me") or "").strip()
        you = (params.get("you") or "").strip()
        message = (params.get("message") or "").strip()
        if me and you and message:
            return cls(RECIPIENT, me, you, message)
        return cls.default()

    def with_form_values(self, me: str, you: str, message: str) -> "CardState":
        return CardState(RECIPIENT, me, you, message)

    @property
    def seed(self) -> str:
        return f"{self.me.strip()}-{self.you.strip()}".lower()

    def share_title(self) -> str:
        return f"Lost in Love for {self.me} and {self.you}"

    def share_text(self) -> str:
        if self.message:
            return f'Lost in Love maze for {self.me} and {self.you}: "{self.message}"'
        return f"Lost in Love unique maze for {self.me} and {self.you}"

    def share_link(self, base_url: str) -> str:
        """base_url with its query replaced by the encoded card."""
        parts = urlsplit(base_url)
        payload = encode_data({"me": self.me, "you": self.you, "message": self.message})
        return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode({"data": payload}), ""))
