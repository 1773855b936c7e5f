"""Testes para api.connectors.buckaroo.http_client.

Usa httpx.MockTransport para inspecionar o request assinado e simular
respostas do provider.
"""

from __future__ import annotations

import json
from decimal import Decimal

import httpx
import pytest

from api.connectors.buckaroo.errors import GatewayTransportError
from api.connectors.buckaroo.http_client import (
    BuckarooHttpClient,
    HttpClientConfig,
    is_retryable_status,
)
from api.connectors.buckaroo.models import (
    DataRequest,
    DebtorInfoResponse,
    ServiceListRequest,
    ServiceRequest,
    TransactionRequest,
    WireParameter,
)
from api.connectors.buckaroo.signature import (
    BuckarooHmacAuth,
    HmacSigner,
    build_signing_string,
    compute_signature,
    hash_content,
)
from config.settings import BuckarooSettings

SETTINGS = BuckarooSettings(
    website_key="WEBSITEKEY",
    private_key="secret",
    base_url="https://testcheckout.buckaroo.nl/",
    configuration_code="cfg",
)

SUCCESS_BODY = {
    "Key": "TX-1",
    "Status": {
        "Code": {"Code": 190, "Description": "Success"},
        "SubCode": {"Code": "S990", "Description": "The request was successful."},
        "DateTime": "2026-10-19T10:00:00",
    },
    "Services": [
        {
            "Name": "CreditManagement3",
            "Action": None,
            "Parameters": [{"Name": "Code", "Value": "d-1"}],
        }
    ],
}


def _data_request() -> DataRequest:
    return DataRequest(
        services=ServiceListRequest(
            service_list=[
                ServiceRequest(
                    name="CreditManagement3",
                    action="DebtorInfo",
                    parameters=[
                        WireParameter(
                            name="DebtorCode", group_type="Debtor", group_id="", value="d-1"
                        )
                    ],
                )
            ]
        )
    )


def _client(handler, **config: object) -> tuple[BuckarooHttpClient, httpx.AsyncClient]:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    signer = HmacSigner(
        website_key="WEBSITEKEY",
        private_key="secret",
        clock=lambda: 1700000000,
        nonce_factory=lambda: "nonce",
    )
    transport = BuckarooHttpClient(
        settings=SETTINGS,
        auth=BuckarooHmacAuth(signer),
        config=HttpClientConfig(**config),  # type: ignore[arg-type]
        client=http,
    )
    return transport, http


class TestIsRetryableStatus:
    """Testes para is_retryable_status."""

    @pytest.mark.parametrize("code", [408, 429, 500, 502, 503])
    def test_transient_codes(self, code: int) -> None:
        assert is_retryable_status(code) is True

    @pytest.mark.parametrize("code", [400, 401, 403, 404, 422])
    def test_permanent_codes(self, code: int) -> None:
        assert is_retryable_status(code) is False


class TestPostDataRequest:
    """Testes para post_data_request."""

    @pytest.mark.asyncio
    async def test_success_parses_envelope(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=SUCCESS_BODY)

        transport, http = _client(handler)
        async with http:
            response = await transport.post_data_request(_data_request(), DebtorInfoResponse)

        assert response.key == "TX-1"
        assert response.status.code.description == "Success"
        assert response.services is not None
        assert response.services[0].parameters[0].value == "d-1"

        request = captured[0]
        assert str(request.url) == "https://testcheckout.buckaroo.nl/json/datarequest"
        assert request.method == "POST"

    @pytest.mark.asyncio
    async def test_request_headers_and_signature(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=SUCCESS_BODY)

        transport, http = _client(handler, default_headers={"Software": "pyloto"})
        async with http:
            await transport.post_data_request(_data_request(), DebtorInfoResponse)

        request = captured[0]
        assert request.headers["culture"] == "nl-NL"
        assert request.headers["channel"] == "Web"
        assert request.headers["Software"] == "pyloto"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["Authorization"].startswith("hmac WEBSITEKEY:")
        assert request.headers["Authorization"].endswith(":nonce:1700000000")

        expected = HmacSigner(
            website_key="WEBSITEKEY",
            private_key="secret",
            clock=lambda: 1700000000,
            nonce_factory=lambda: "nonce",
        ).sign(request.method, request.url, request.content)
        assert request.headers["Authorization"] == expected

        _, _, credentials = expected.partition(" ")
        signature = credentials.split(":")[1]
        signing_string = build_signing_string(
            "WEBSITEKEY",
            "POST",
            "testcheckout.buckaroo.nl%2fjson%2fdatarequest",
            1700000000,
            "nonce",
            hash_content(request.content),
        )
        assert signature == compute_signature("secret", signing_string)

    @pytest.mark.asyncio
    async def test_payload_uses_wire_aliases(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=SUCCESS_BODY)

        transport, http = _client(handler)
        async with http:
            await transport.post_data_request(_data_request(), DebtorInfoResponse)

        payload = json.loads(captured[0].content)
        service = payload["Services"]["ServiceList"][0]
        assert service["Name"] == "CreditManagement3"
        assert service["Action"] == "DebtorInfo"
        assert service["Parameters"] == [
            {"Name": "DebtorCode", "GroupType": "Debtor", "GroupID": "", "Value": "d-1"}
        ]

    @pytest.mark.asyncio
    async def test_non_2xx_raises_transport_error(self) -> None:
        transport, http = _client(lambda request: httpx.Response(503, text="down"))
        async with http:
            with pytest.raises(GatewayTransportError) as exc_info:
                await transport.post_data_request(_data_request(), DebtorInfoResponse)

        assert exc_info.value.status_code == 503
        assert exc_info.value.is_retryable is True

    @pytest.mark.asyncio
    async def test_client_error_is_not_retryable(self) -> None:
        transport, http = _client(lambda request: httpx.Response(401, text="unauthorized"))
        async with http:
            with pytest.raises(GatewayTransportError) as exc_info:
                await transport.post_data_request(_data_request(), DebtorInfoResponse)

        assert exc_info.value.status_code == 401
        assert exc_info.value.is_retryable is False

    @pytest.mark.asyncio
    async def test_null_sub_code_is_accepted(self) -> None:
        body = {
            **SUCCESS_BODY,
            "Status": {"Code": {"Code": 190, "Description": "Success"}, "SubCode": None},
        }
        transport, http = _client(lambda request: httpx.Response(200, json=body))
        async with http:
            response = await transport.post_data_request(_data_request(), DebtorInfoResponse)

        assert response.status.sub_code is None
        assert response.status.description == "Success"

    @pytest.mark.asyncio
    async def test_invalid_body_raises_transport_error(self) -> None:
        transport, http = _client(lambda request: httpx.Response(200, text="not json"))
        async with http:
            with pytest.raises(GatewayTransportError, match="invalid_response_body"):
                await transport.post_data_request(_data_request(), DebtorInfoResponse)

    @pytest.mark.asyncio
    async def test_connection_error_is_retryable(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        transport, http = _client(handler)
        async with http:
            with pytest.raises(GatewayTransportError, match="http_connection_error") as exc_info:
                await transport.post_data_request(_data_request(), DebtorInfoResponse)

        assert exc_info.value.is_retryable is True
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestPostTransaction:
    """Testes para post_transaction."""

    @pytest.mark.asyncio
    async def test_posts_to_transaction_endpoint_with_numeric_amounts(self) -> None:
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json=SUCCESS_BODY)

        request = TransactionRequest(
            currency="EUR",
            start_recurrent="true",
            continue_on_incomplete="1",
            amount_debit=Decimal("10.00"),
            services=ServiceListRequest(service_list=[]),
        )
        transport, http = _client(handler)
        async with http:
            await transport.post_transaction(request, DebtorInfoResponse)

        assert str(captured[0].url) == "https://testcheckout.buckaroo.nl/json/transaction"
        payload = json.loads(captured[0].content)
        assert payload["AmountDebit"] == 10.0
        assert payload["AmountCredit"] == 0
        assert payload["Currency"] == "EUR"
        assert "ReturnURL" not in payload
