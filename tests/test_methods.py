"""Tests for method handlers and the method registry."""

from typing import get_args

import pytest
from pydantic import ValidationError

from vertinfo.models import EconConf
from vertinfo.rpc.errors import MethodNotFoundError
from vertinfo.rpc.methods import (
    METHODS,
    MethodName,
    get_active_chains,
    get_burn_status,
    get_confirmations,
    get_econ_conf,
    resolve_method,
)
from vertinfo.rpc.params import ChainIdParams, HashParams, NoParams
from vertinfo.testing import FakeStore


def test_registry_covers_every_method_name():
    assert set(METHODS) == set(get_args(MethodName))
    for name, spec in METHODS.items():
        assert spec.name == name


def test_resolve_known_method():
    assert resolve_method("get_burnStatus").params is HashParams


def test_resolve_unknown_method_keeps_id():
    with pytest.raises(MethodNotFoundError) as exc_info:
        resolve_method("get_nonexistent", 5)
    assert exc_info.value.request_id == 5
    assert exc_info.value.http_status == 404


def test_method_names_are_case_sensitive():
    with pytest.raises(MethodNotFoundError):
        resolve_method("GET_ECONCONF")


@pytest.mark.asyncio
async def test_get_econ_conf(store, econ_conf):
    result = await get_econ_conf(store, ChainIdParams(chainId=1))
    assert result == econ_conf
    assert store.lookups == [("econConf", 1)]


@pytest.mark.asyncio
async def test_get_confirmations_validates_shape(store):
    result = await get_confirmations(store, ChainIdParams(chainId=1))
    assert isinstance(result, EconConf)
    assert result.base_fee == 255
    assert result.gas_price_multiplier == (2, 1)


@pytest.mark.asyncio
async def test_float_chain_id_finds_integer_key(store, econ_conf):
    assert await get_econ_conf(store, ChainIdParams(chainId=1.0)) == econ_conf


@pytest.mark.asyncio
async def test_get_active_chains(store):
    assert await get_active_chains(store, NoParams()) == [1, 137]
    assert store.lookups == [("chains",)]


@pytest.mark.asyncio
async def test_get_burn_status(store):
    assert await get_burn_status(store, HashParams(hash="0xabc")) == "confirmed"
    assert store.lookups == [("status", "0xabc")]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "handler,params",
    [
        (get_econ_conf, ChainIdParams(chainId=999)),
        (get_confirmations, ChainIdParams(chainId=999)),
        (get_burn_status, HashParams(hash="0xdead")),
    ],
)
async def test_absent_key_returns_none(store, handler, params):
    assert await handler(store, params) is None


@pytest.mark.asyncio
async def test_empty_store_active_chains_is_none():
    assert await get_active_chains(FakeStore(), NoParams()) is None


@pytest.mark.asyncio
async def test_malformed_stored_econ_conf_raises():
    store = FakeStore({("econConf", 1): {"baseFee": 1}})
    with pytest.raises(ValidationError):
        await get_econ_conf(store, ChainIdParams(chainId=1))


@pytest.mark.parametrize(
    "value",
    [
        {"gasLimitMultiplier": [1, 1], "gasPriceMultiplier": [1, 1], "baseFee": -1},
        {"gasLimitMultiplier": [-1, 1], "gasPriceMultiplier": [1, 1], "baseFee": 1},
        {"gasLimitMultiplier": [1, 0], "gasPriceMultiplier": [1, 1], "baseFee": 1},
    ],
)
def test_econ_conf_rejects_negative_values_and_zero_denominator(value):
    with pytest.raises(ValidationError):
        EconConf.model_validate(value)
