import time
from typing import Any, Dict, Optional

import requests

from unoform.generation.models import build_model_input, get_model_config

TERMINAL_SUCCESS = "succeeded"
TERMINAL_FAILURE = "failed"


class GenerationError(Exception):
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class GenerationTimeout(GenerationError):
    def __init__(self, message: str):
        super().__init__(message, status_code=504)


class ReplicateClient:
    """
    Minimal prediction API client: create a prediction, then poll its
    status URL until it succeeds or fails.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.replicate.com/v1",
        poll_interval: float = 1.0,
        max_attempts: int = 30,
        timeout: int = 60,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts
        self.timeout = timeout

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Token {self.api_key}",
        }

    def _check(self, response: requests.Response, action: str) -> Dict[str, Any]:
        if not response.ok:
            try:
                detail = response.json().get("detail", "Unknown error")
            except ValueError:
                detail = response.text or "Unknown error"
            print(f"[Replicate] {action} error ({response.status_code}): {detail}")
            raise GenerationError(f"Replicate {action} error: {detail}", response.status_code)
        return response.json()

    def create_prediction(self, version: str, model_input: Dict[str, Any]) -> Dict[str, Any]:
        response = requests.post(
            f"{self.base_url}/predictions",
            headers=self.headers,
            json={"version": version, "input": model_input},
            timeout=self.timeout,
        )
        return self._check(response, "API")

    def get_prediction(self, url: str) -> Dict[str, Any]:
        response = requests.get(url, headers=self.headers, timeout=self.timeout)
        return self._check(response, "status API")

    def wait_for_prediction(self, prediction: Dict[str, Any]) -> Any:
        """Poll until the prediction reaches a terminal status and return its output"""
        endpoint_url = (prediction.get("urls") or {}).get("get")
        if not endpoint_url:
            raise GenerationError("Invalid response from Replicate API", 500)

        for attempt in range(1, self.max_attempts + 1):
            print(f"[Replicate] polling for results... attempt {attempt}")
            status = self.get_prediction(endpoint_url)

            if status.get("status") == TERMINAL_SUCCESS:
                return status.get("output")
            if status.get("status") == TERMINAL_FAILURE:
                error = status.get("error") or "Image generation failed"
                print(f"[Replicate] Generation failed: {error}")
                raise GenerationError(f"Generation failed: {error}", 500)

            time.sleep(self.poll_interval)

        raise GenerationTimeout("Timeout: Image generation took too long")

    def generate(
        self,
        model_type: str,
        prompt: str,
        image_url: str,
        guidance: Optional[float] = None,
        steps: Optional[int] = None,
    ) -> Any:
        config = get_model_config(model_type)
        model_input = build_model_input(model_type, prompt, image_url, guidance=guidance, steps=steps)
        prediction = self.create_prediction(config.version, model_input)
        return self.wait_for_prediction(prediction)


def get_generation_client() -> ReplicateClient:
    from unoform.config import (
        REPLICATE_API_KEY,
        REPLICATE_BASE_URL,
        REPLICATE_MAX_ATTEMPTS,
        REPLICATE_POLL_INTERVAL,
    )

    return ReplicateClient(
        api_key=REPLICATE_API_KEY,
        base_url=REPLICATE_BASE_URL,
        poll_interval=REPLICATE_POLL_INTERVAL,
        max_attempts=REPLICATE_MAX_ATTEMPTS,
    )
