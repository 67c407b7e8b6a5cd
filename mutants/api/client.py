from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence

import requests


@dataclass
class MutantApiClient:
    base_url: str
    timeout: float = 10.0
    session: requests.Session = field(default_factory=requests.Session)

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{path}"

    def is_mutant(self, dna: Sequence[str]) -> bool:
        try:
            response = self.session.post(
                self._url("/mutant"),
                json={"dna": list(dna)},
                timeout=self.timeout,
            )
        except requests.Timeout as exc:  # pragma: no cover - network conditions
            raise RuntimeError("Timed out waiting for mutant check response") from exc
        except requests.RequestException as exc:  # pragma: no cover - network conditions
            raise RuntimeError(f"Failed to call Mutant API: {exc}") from exc
        if response.status_code == 200:
            return True
        if response.status_code == 403:
            return False
        raise RuntimeError(
            f"Mutant API rejected request status={response.status_code}: {_error_message(response)}"
        )

    def stats(self) -> Dict[str, Any]:
        try:
            response = self.session.get(self._url("/stats"), timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.Timeout as exc:  # pragma: no cover - network conditions
            raise RuntimeError("Timed out waiting for stats response") from exc
        except requests.RequestException as exc:
            raise RuntimeError(f"Failed to fetch stats: {exc}") from exc


def _error_message(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return str(data)


__all__ = ["MutantApiClient"]
