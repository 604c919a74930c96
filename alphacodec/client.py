"""UniProt HTTP client returning records through the CSV codec.

Requests the tabular export with exactly the columns the CSV codec reads, so
the response body parses with :class:`alphacodec.UniProtCodec` unchanged.
"""

import io
import logging
from typing import Iterable, Iterator, Optional

import requests

from .config import CsvParams, Policy
from .constants import UNIPROT_BASE_URL
from .errors import FromUtf8Error, IoError
from .formats.uniprot_csv import CsvRecordIter
from .iterators import apply_policy

logger = logging.getLogger(__name__)

# Legacy column keys, in HEADER order
UNIPROT_COLUMNS = [
    "version(sequence)",
    "existence",
    "mass",
    "length",
    "genes(PREFERRED)",
    "id",
    "entry name",
    "protein names",
    "organism",
    "proteome",
    "sequence",
    "organism-id",
]


class UniProtClient:
    """Fetch UniProtKB entries by accession.

    Parameters
    ----------
    base_url : str
        Query endpoint
    session : requests.Session, optional
        Reused HTTP session (one is created when omitted)
    timeout : float
        Request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = UNIPROT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
    ):
        self.base_url = base_url
        self.session = session or requests.Session()
        self.timeout = timeout

    @staticmethod
    def build_params(accessions: Iterable[str]) -> dict:
        query = " OR ".join(f"id:{accession}" for accession in accessions)
        return {
            "query": query,
            "format": "tab",
            "columns": ",".join(UNIPROT_COLUMNS),
        }

    def fetch_text(self, accessions: Iterable[str]) -> str:
        """Raw tab-delimited response body."""
        params = self.build_params(accessions)
        logger.info(f"UniProt query: {params['query']}")
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise IoError(f"UniProt request failed: {exc}") from exc
        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FromUtf8Error(f"UniProt response is not UTF-8: {exc}") from exc

    def fetch(self, accessions: Iterable[str], policy: Policy = Policy.DEFAULT) -> Iterator:
        """Records for the given accessions, in response order."""
        text = self.fetch_text(accessions)
        records = CsvRecordIter(io.StringIO(text), CsvParams.for_tsv())
        return apply_policy(records, policy)
