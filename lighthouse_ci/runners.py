# The MIT License (MIT)
# Copyright © 2025 Entrius

"""
Lighthouse CI backend invocation.

Each Runner has a strategy that knows its endpoint, the request body it
expects and how to read the response. invoke_run() sends exactly one POST and
never retries.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from lighthouse_ci.classes import Configuration, Runner
from lighthouse_ci.constants import API_KEY_HEADER, RUN_ON_CHROME_PATH, RUN_ON_WPT_PATH
from lighthouse_ci.settings import Settings
from lighthouse_ci.utils.utils import mask_secret

logger = logging.getLogger(__name__)


class RunStrategy(ABC):
    """Request building and response reading for one runner."""

    path = ''

    def endpoint(self, ci_host: str) -> str:
        return f"{ci_host.rstrip('/')}{self.path}"

    def build_body(self, config: Configuration) -> Dict[str, Any]:
        return config.to_payload()

    @abstractmethod
    def summarize(self, response: Dict[str, Any], config: Configuration) -> str:
        """Return the message reported on success.

        Raises KeyError or TypeError when the response lacks the expected fields.
        """


class ChromeStrategy(RunStrategy):
    path = RUN_ON_CHROME_PATH

    def build_body(self, config: Configuration) -> Dict[str, Any]:
        body = super().build_body(config)
        body['output'] = 'json'
        return body

    def summarize(self, response: Dict[str, Any], config: Configuration) -> str:
        score = response.get('score')
        message = f"Lighthouse CI score: {score}"
        if config.min_pass_score and isinstance(score, (int, float)):
            verdict = 'passes' if score >= config.min_pass_score else 'is below'
            message += f" ({verdict} minimum score {config.min_pass_score:g})"
        return message


class WebPageTestStrategy(RunStrategy):
    path = RUN_ON_WPT_PATH

    def summarize(self, response: Dict[str, Any], config: Configuration) -> str:
        return f"Started Lighthouse run on WebPageTest: {response['data']['target_url']}"


RUN_STRATEGIES: Dict[Runner, RunStrategy] = {
    Runner.CHROME: ChromeStrategy(),
    Runner.WPT: WebPageTestStrategy(),
}


def make_headers(api_key: Optional[str]) -> Dict[str, str]:
    headers = {'Content-Type': 'application/json'}
    if api_key:
        headers[API_KEY_HEADER] = api_key
    return headers


def invoke_run(config: Configuration, settings: Settings) -> Optional[str]:
    """POST ``config`` to the Lighthouse CI backend once.

    Args:
        config (Configuration): Resolved run configuration.
        settings (Settings): Environment snapshot with the CI host and API key.

    Returns:
        Optional[str]: Summary of the response, or None if the request or the
        response parsing failed.
    """
    strategy = RUN_STRATEGIES[config.runner]
    endpoint = strategy.endpoint(settings.ci_host)
    body = strategy.build_body(config)

    if not settings.api_key:
        logger.warning('No Lighthouse CI API key configured, the request will be sent without one')
    else:
        logger.debug(f"Using API key {mask_secret(settings.api_key)}")

    logger.info(f"POST {endpoint} for {config.repo.full_name} {config.pr}")
    try:
        response = requests.post(endpoint, json=body, headers=make_headers(settings.api_key))
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error(f"Lighthouse CI request to {endpoint} failed: {e}")
        return None

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"Lighthouse CI returned invalid JSON: {e}")
        return None

    try:
        return strategy.summarize(data, config)
    except (AttributeError, KeyError, TypeError) as e:
        logger.error(f"Unexpected Lighthouse CI response {data!r}: {e!r}")
        return None
