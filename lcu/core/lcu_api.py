#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU API Request Handler
Handles HTTP requests to LCU API
"""

import threading
import time
from typing import Any, Optional

import requests

from config import LCU_API_TIMEOUT_S
from party.errors import ParseError, TransportError
from utils.core.logging import get_logger

log = get_logger()


class LCUAPI:
    """
    Handles HTTP requests to LCU API

    Every call carries a bounded timeout. `request()` raises TransportError,
    the convenience getters return None instead ("nothing happened").
    Once the stop event is set no new request is started.
    """

    def __init__(self, connection, stop_event: Optional[threading.Event] = None,
                 timeout: float = LCU_API_TIMEOUT_S):
        """Initialize API handler

        Args:
            connection: LCUConnection instance
            stop_event: Shared cancellation token
            timeout: Default request timeout in seconds
        """
        self.connection = connection
        self.stop_event = stop_event
        self.timeout = timeout

    def _ensure_ready(self):
        if self.stop_event is not None and self.stop_event.is_set():
            raise TransportError("shutting down")
        if not self.connection.ok:
            self.connection.refresh_if_needed()
            if not self.connection.ok:
                raise TransportError("LCU not connected")

    def _send(self, method: str, path: str, json_data: Any, timeout: float) -> requests.Response:
        t0 = time.perf_counter()
        resp = self.connection.session.request(
            method, (self.connection.base or "") + path, json=json_data, timeout=timeout
        )
        dt_ms = (time.perf_counter() - t0) * 1000.0
        log.trace(f"[LCU] {method} {path} -> {resp.status_code} in {dt_ms:.1f}ms")
        return resp

    def request(self, method: str, path: str, json_data: Any = None,
                timeout: Optional[float] = None) -> requests.Response:
        """Send a request, reconnecting and retrying once on connection failure

        Raises:
            TransportError: connection unavailable or both attempts failed
        """
        timeout = self.timeout if timeout is None else timeout
        self._ensure_ready()
        try:
            return self._send(method, path, json_data, timeout)
        except requests.exceptions.RequestException as exc:
            log.debug(f"[LCU] {method} {path} failed ({type(exc).__name__}), retrying")
            self.connection.refresh_if_needed(force=True)
            self._ensure_ready()
            try:
                return self._send(method, path, json_data, timeout)
            except requests.exceptions.RequestException as exc2:
                raise TransportError(f"{method} {path} failed: {exc2}") from exc2

    def fetch_json(self, path: str, timeout: Optional[float] = None) -> Any:
        """GET and decode JSON

        Raises:
            TransportError: unreachable client or non-2xx status
            ParseError: body is not JSON
        """
        resp = self.request("GET", path, timeout=timeout)
        if not 200 <= resp.status_code < 300:
            raise TransportError(f"GET {path} returned {resp.status_code}", status=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise ParseError(f"GET {path} returned invalid JSON: {e}") from e

    def get(self, path: str, timeout: Optional[float] = None) -> Optional[Any]:
        """Make GET request to LCU API

        Returns:
            Decoded JSON, or None on any failure
        """
        try:
            return self.fetch_json(path, timeout)
        except TransportError as e:
            if e.status not in (404, 405):
                log.debug(f"[LCU] GET {path} unavailable: {e}")
            return None
        except ParseError as e:
            log.debug(f"[LCU] {e}")
            return None

    def post(self, path: str, json_data: Any, timeout: Optional[float] = None) -> Optional[requests.Response]:
        """Make POST request to LCU API, returns the response or None if it could not be sent"""
        try:
            return self.request("POST", path, json_data, timeout)
        except TransportError as e:
            log.warning(f"[LCU] POST {path} failed: {e}")
            return None
