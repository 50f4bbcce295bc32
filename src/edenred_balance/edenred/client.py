from __future__ import annotations

import json
import logging
import sys
from decimal import Decimal
from typing import TextIO, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..config import DEFAULT_BASE_URL, DEFAULT_CARD_ID
from ..errors import APIError, DecodeError, NetworkError
from .models import AccountMovementResponse, LoginRequest, LoginResponse
from .session import build_http_client

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:73.0) Gecko/20100101 Firefox/73.0"

LOGIN_PATH = "/authenticate/default"
LOGIN_PARAMS = {"appVersion": "1.0", "appType": "PORTAL", "channel": "WEB"}

M = TypeVar("M", bound=BaseModel)


def _decode(resp: httpx.Response, model: type[M]) -> M:
    try:
        data = json.loads(resp.content, parse_float=Decimal)
    except ValueError as e:
        raise DecodeError(f"error decoding json: {e}") from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"error decoding json: {e}") from e


class EdenredClient:
    """
    Two-step client for the Edenred customer API:
    login() exchanges credentials for a token, transactions() uses it once.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        card_id: str = DEFAULT_CARD_ID,
        http_client: httpx.Client | None = None,
        debug: bool = False,
    ):
        self._card_id = card_id
        self._debug = debug
        self._client = http_client or build_http_client(base_url)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "EdenredClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _send(self, method: str, path: str, **kwargs) -> httpx.Response:
        headers = {
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
        }
        headers.update(kwargs.pop("headers", {}))

        try:
            resp = self._client.request(method, path, headers=headers, **kwargs)
        except httpx.DecodingError as e:
            raise DecodeError(f"error decoding response body: {e}") from e
        except httpx.RequestError as e:
            raise NetworkError(f"error executing request: {e}") from e

        if self._debug:
            logger.debug("%s %s -> %s %s", method, path, resp.status_code, resp.text)
        return resp

    def login(self, user_id: str, password: str) -> str:
        body = LoginRequest(userId=user_id, password=password).to_json_bytes()
        resp = self._send("POST", LOGIN_PATH, params=LOGIN_PARAMS, content=body)

        if resp.status_code != 200:
            raise APIError(resp.status_code, resp.text)

        return _decode(resp, LoginResponse).data.token

    def transactions(self, token: str, out: TextIO | None = None) -> Decimal:
        """
        Fetch the card's movements, write each one to `out` as a JSON line
        and return the available balance.

        The whole body is validated before the first line is written.
        """
        out = out or sys.stdout
        resp = self._send(
            "GET",
            f"/protected/card/{self._card_id}/accountmovement",
            headers={"Authorization": token},
        )
        tx = _decode(resp, AccountMovementResponse)

        for m in tx.data.movementList:
            try:
                line = m.to_json_line()
            except Exception as e:
                logger.error("error marshalling movement %s: %s", m.transactionDate, e)
                continue
            print(line, file=out)

        return tx.data.account.availableBalance

    def check_balance(self, user_id: str, password: str, out: TextIO | None = None) -> Decimal:
        token = self.login(user_id, password)
        logger.info("logged in")

        balance = self.transactions(token, out=out)
        logger.info("retrieved all transactions (balance=%s)", balance)
        return balance
