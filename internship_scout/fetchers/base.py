"""Base classes for posting fetchers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

import requests

from internship_scout.models import Posting


class BaseFetcher(ABC):
    def __init__(self, source_name: str, url: str, session: requests.Session, timeout: float = 30) -> None:
        self.source_name = source_name
        self.url = url
        self.session = session
        self.timeout = timeout

    def fetch_html(self) -> str:
        resp = self.session.get(self.url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.text

    @abstractmethod
    def parse(self, html: str) -> List[Posting]:
        raise NotImplementedError
