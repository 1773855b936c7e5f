"""Assinatura HMAC-SHA256 de requests para a API Buckaroo.

Cada request recebe timestamp e nonce novos; nada é memoizado entre chamadas.

String canônica (sem delimitadores, ordem fixa):
    website_key + METHOD + url_canonica + timestamp + nonce + base64(md5(body))

Header resultante:
    Authorization: hmac {website_key}:{assinatura_b64}:{nonce}:{timestamp}
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import time
import uuid
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from urllib.parse import quote

import httpx

from api.connectors.buckaroo.constants import AUTHORIZATION_SCHEME


def _default_nonce() -> str:
    return uuid.uuid4().hex


def canonicalize_url(url: str | httpx.URL) -> str:
    """Retorna authority + path + query percent-encoded e em minúsculas.

    Todos os caracteres fora do conjunto não-reservado (RFC 3986) são
    escapados, inclusive `/`, `:`, `?` e `&`.
    """
    parsed = url if isinstance(url, httpx.URL) else httpx.URL(url)
    authority = parsed.netloc.decode("ascii")
    path_and_query = parsed.raw_path.decode("ascii")
    return quote(authority + path_and_query, safe="").lower()


def hash_content(body: bytes | None) -> str:
    """Base64 do MD5 do corpo; string vazia quando não há corpo."""
    if not body:
        return ""
    return base64.b64encode(hashlib.md5(body).digest()).decode("ascii")


def build_signing_string(
    website_key: str,
    method: str,
    canonical_url: str,
    timestamp: int,
    nonce: str,
    content_hash: str,
) -> str:
    return f"{website_key}{method.upper()}{canonical_url}{timestamp}{nonce}{content_hash}"


def compute_signature(private_key: str, signing_string: str) -> str:
    """HMAC-SHA256 (chave = private_key UTF-8) em base64."""
    digest = hmac.new(
        private_key.encode("utf-8"),
        signing_string.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def format_authorization(website_key: str, signature: str, nonce: str, timestamp: int) -> str:
    return f"{AUTHORIZATION_SCHEME} {website_key}:{signature}:{nonce}:{timestamp}"


@dataclass(frozen=True)
class HmacSigner:
    """Assina requests com as credenciais do website Buckaroo.

    Attributes:
        website_key: Chave pública do website
        private_key: Secret compartilhado (nunca logar)
        clock: Fonte de tempo em segundos Unix (injetável para testes)
        nonce_factory: Gerador de nonce hex (injetável para testes)
    """

    website_key: str
    private_key: str = field(repr=False)
    clock: Callable[[], float] = time.time
    nonce_factory: Callable[[], str] = _default_nonce

    def sign(self, method: str, url: str | httpx.URL, body: bytes | None = None) -> str:
        """Calcula o valor do header Authorization para um request.

        Args:
            method: Método HTTP
            url: URL absoluta do request
            body: Corpo bruto (None/vazio para requests sem corpo)

        Returns:
            Valor completo do header (`hmac key:sig:nonce:ts`)
        """
        timestamp = int(self.clock())
        nonce = self.nonce_factory()
        signing_string = build_signing_string(
            self.website_key,
            method,
            canonicalize_url(url),
            timestamp,
            nonce,
            hash_content(body),
        )
        signature = compute_signature(self.private_key, signing_string)
        return format_authorization(self.website_key, signature, nonce, timestamp)


class BuckarooHmacAuth(httpx.Auth):
    """Auth httpx que assina cada request imediatamente antes do envio."""

    requires_request_body = True

    def __init__(self, signer: HmacSigner) -> None:
        self._signer = signer

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = self._signer.sign(
            request.method,
            request.url,
            request.content,
        )
        yield request
