from dataclasses import dataclass
from typing import Dict


@dataclass
class SoupConfig:
    """Headers, cookies and failure policy shared by parsing, queries and fetching"""
    headers: Dict[str, str] = None
    cookies: Dict[str, str] = None
    debug: bool = False
    features: str = 'html.parser'

    def __post_init__(self):
        if self.headers is None:
            self.headers = {}
        if self.cookies is None:
            self.cookies = {}


class ConfigBuilder:
    """Fluent builder for SoupConfig"""

    def __init__(self, base: SoupConfig = None):
        base = base or SoupConfig()
        self._headers = dict(base.headers)
        self._cookies = dict(base.cookies)
        self._debug = base.debug
        self._features = base.features

    def header(self, name: str, value: str):
        """Set an HTTP header sent with every request"""
        self._headers[name] = value
        return self

    def cookie(self, name: str, value: str):
        """Set a cookie sent with every request"""
        self._cookies[name] = value
        return self

    def debug(self, enable: bool = True):
        """Raise failures immediately instead of returning them"""
        self._debug = enable
        return self

    def features(self, name: str):
        """Select the BeautifulSoup tree builder"""
        self._features = name
        return self

    def build(self) -> SoupConfig:
        """Build an independent config; later builder calls do not affect it"""
        return SoupConfig(
            headers=dict(self._headers),
            cookies=dict(self._cookies),
            debug=self._debug,
            features=self._features
        )
