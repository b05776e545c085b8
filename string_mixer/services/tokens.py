import base64
import binascii
import logging
from typing import List, Optional
from urllib.parse import parse_qs, quote, unquote, urlencode, urlsplit

from string_mixer.core.config import settings
from string_mixer.core.exceptions import InvalidTokenError, MixerError
from string_mixer.schemas.token import IssuedToken, MixedToken, TokenPurpose
from string_mixer.services.mixer import StringMixer, default_mixer

logger = logging.getLogger(__name__)

KEY_QUERY_PARAM = "k"


class TokenService:
    """Turns mixed tokens into links and back.

    Storing the token (and expiring it) is up to the caller. Anything wrong
    with a token read back from a link surfaces as the same
    InvalidTokenError; the reason only goes to the log.
    """

    def __init__(self, mixer: Optional[StringMixer] = None, app_url: Optional[str] = None):
        self.mixer = mixer or default_mixer
        self.app_url = (app_url or settings.APP_URL).rstrip("/")

    def issue(self, purpose: TokenPurpose, *values: str) -> IssuedToken:
        if len(values) != purpose.field_count:
            raise ValueError(
                f"{purpose.value} tokens carry {purpose.field_count} values, got {len(values)}"
            )
        token = self.mixer.encode(*values)
        link = self.build_link(purpose, token)
        logger.info("Issued %s token (%d characters)", purpose.value, len(token.value))
        return IssuedToken(purpose=purpose, token=token, link=link)

    def build_link(self, purpose: TokenPurpose, token: MixedToken) -> str:
        value = token.value
        if purpose.base64_value:
            value = base64.b64encode(value.encode("utf-8")).decode("ascii")
        query = urlencode({KEY_QUERY_PARAM: token.key})
        return f"{self.app_url}{purpose.link_path}/{quote(value, safe='')}?{query}"

    def parse_link(self, purpose: TokenPurpose, url: str) -> MixedToken:
        parts = urlsplit(url)
        prefix = urlsplit(self.app_url).path + purpose.link_path + "/"
        if not parts.path.startswith(prefix):
            logger.warning(f"Link path does not match {purpose.value}: {parts.path[:50]}")
            raise InvalidTokenError()

        value = unquote(parts.path[len(prefix):])
        if purpose.base64_value:
            try:
                value = base64.b64decode(value, validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as e:
                logger.warning(f"Undecodable {purpose.value} link value: {e}")
                raise InvalidTokenError() from None

        keys = parse_qs(parts.query).get(KEY_QUERY_PARAM)
        if not keys:
            logger.warning(f"{purpose.value} link has no key parameter")
            raise InvalidTokenError()
        return MixedToken(value=value, key=keys[0])

    def read(self, purpose: TokenPurpose, value: str, key: str) -> List[str]:
        try:
            decoded = self.mixer.decode(value, key)
        except MixerError as e:
            logger.warning(f"Rejected {purpose.value} token: {e}")
            raise InvalidTokenError() from None

        if len(decoded) != purpose.field_count:
            logger.warning(
                f"Rejected {purpose.value} token: decoded {len(decoded)} values, "
                f"expected {purpose.field_count}"
            )
            raise InvalidTokenError()
        return decoded

    def read_link(self, purpose: TokenPurpose, url: str) -> List[str]:
        token = self.parse_link(purpose, url)
        return self.read(purpose, token.value, token.key)
