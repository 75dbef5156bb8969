# scout/llm_guard.py
# One search-grounded, schema-constrained OpenAI call per funding category.
import json
import logging
from typing import List, Optional

from openai import OpenAI

from scout.config import get_model
from scout.models import Company
from scout.normalizer import normalize_companies, unwrap_payload
from scout.query_builder import build_request, response_format

logger = logging.getLogger(__name__)


class ScoutError(RuntimeError):
    pass


class MissingApiKeyError(ScoutError):
    def __init__(self):
        super().__init__(
            "OPENAI_API_KEY is not set. Add it to the environment (or Streamlit secrets) and rerun."
        )


class SeriesFetchError(ScoutError):
    def __init__(self, series_label: str, reason: str = ""):
        self.series_label = series_label
        msg = f"Failed to fetch companies for {series_label}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


def _get_client(api_key: str) -> OpenAI:
    return OpenAI(api_key=api_key)


def fetch_companies_for_series(
    series_label: str,
    api_key: Optional[str],
    regional_only: bool = False,
    client: Optional[OpenAI] = None,
) -> List[Company]:
    """
    Single structured-output call for one category.
    - Fails fast with MissingApiKeyError before anything is built
    - Web search tool enabled, JSON schema enforced
    - Empty output -> []; any call/parse failure -> SeriesFetchError (no retry)
    """
    if not api_key:
        raise MissingApiKeyError()

    request = build_request(series_label, regional_only)
    client = client or _get_client(api_key)

    try:
        resp = client.responses.create(
            model=get_model(),
            input=request["prompt"],
            tools=[{"type": "web_search"}],
            text={"format": response_format(request["schema"])},
        )
        text = getattr(resp, "output_text", None)
        if not text:
            logger.info("Empty response for %s", series_label)
            return []
        parsed = json.loads(text)
    except Exception as e:
        logger.exception("Error fetching data for %s", series_label)
        raise SeriesFetchError(series_label, str(e)) from e

    companies = normalize_companies(unwrap_payload(parsed), series_label)
    logger.info("Fetched %d companies for %s", len(companies), series_label)
    return companies
