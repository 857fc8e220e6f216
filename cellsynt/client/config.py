"""
Client Configuration
====================
Credentials and default message values for the gateway client.
"""

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from cellsynt.http.exceptions import ConfigurationError
from cellsynt.http.transport import DEFAULT_TIMEOUT
from cellsynt.messaging.models import ALLOW_CONCAT_TOKEN, Charset, OriginatorType
from cellsynt.messaging.params import clear_empty

DEFAULT_API_URL = "https://se-1.cellsynt.net/sms.php"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class ClientConfig:
    """
    Configuration for the gateway client.

    Everything except the credentials is a default that a message can
    override with its own value.
    """
    username: str
    password: str
    originator_type: Optional[OriginatorType] = None
    originator: str = ""
    charset: Optional[Charset] = None
    allow_concat: bool = False
    default_country_code: str = ""
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """
        Build a configuration from ``CELLSYNT_*`` environment variables.

        Raises:
            ConfigurationError: If username or password is missing
        """
        env = os.environ if environ is None else environ

        username = env.get("CELLSYNT_USERNAME", "")
        password = env.get("CELLSYNT_PASSWORD", "")
        if not username or not password:
            raise ConfigurationError(
                "CELLSYNT_USERNAME and CELLSYNT_PASSWORD must be set"
            )

        originator_type = env.get("CELLSYNT_ORIGINATOR_TYPE", "")
        charset = env.get("CELLSYNT_CHARSET", "")
        try:
            return cls(
                username=username,
                password=password,
                originator_type=OriginatorType(originator_type) if originator_type else None,
                originator=env.get("CELLSYNT_ORIGINATOR", ""),
                charset=Charset(charset) if charset else None,
                allow_concat=env.get("CELLSYNT_ALLOW_CONCAT", "").lower() in _TRUE_VALUES,
                default_country_code=env.get("CELLSYNT_COUNTRY_CODE", ""),
                api_url=env.get("CELLSYNT_API_URL", DEFAULT_API_URL),
                timeout=float(env.get("CELLSYNT_TIMEOUT", DEFAULT_TIMEOUT)),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid client configuration: {e}") from e

    def get_parameters(self) -> Dict[str, str]:
        """Default form parameters sent with every message."""
        return clear_empty({
            "username": self.username,
            "password": self.password,
            "originatortype": self.originator_type.value if self.originator_type else "",
            "originator": self.originator,
            "charset": self.charset.value if self.charset else "",
            "allowconcat": ALLOW_CONCAT_TOKEN if self.allow_concat else "",
        })
