# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from mcpperf.common.exceptions import ConfigurationError, PoolCapacityError
from mcpperf.orchestrator import ClientPool


class TestClientPool:
    def test_ensure_capacity_grows_only(self, client_factory, created_clients):
        pool = ClientPool(client_factory)

        assert pool.ensure_capacity(3) == 3
        assert pool.ensure_capacity(2) == 0
        assert pool.ensure_capacity(5) == 2
        assert pool.size == 5
        assert list(pool.handles) == created_clients

    def test_add_clients_is_unconditional(self, client_factory):
        pool = ClientPool(client_factory)
        pool.ensure_capacity(2)
        assert pool.add_clients(2) == 2
        assert pool.size == 4

    def test_add_clients_logs_total(self, client_factory, log_sink):
        pool = ClientPool(client_factory, log_sink=log_sink)
        pool.add_clients(3)
        assert log_sink.messages["info"] == ["Total clients: 3"]

    def test_max_size_is_enforced_before_creating(self, client_factory, created_clients):
        pool = ClientPool(client_factory, max_size=4)
        pool.ensure_capacity(2)

        with pytest.raises(PoolCapacityError) as exc_info:
            pool.ensure_capacity(5)

        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.requested == 5
        assert exc_info.value.max_size == 4
        assert pool.size == 2
        assert len(created_clients) == 2

    def test_take_returns_first_handles(self, client_factory, created_clients):
        pool = ClientPool(client_factory)
        pool.ensure_capacity(4)
        assert pool.take(2) == created_clients[:2]

    def test_take_more_than_pool_raises(self, client_factory):
        pool = ClientPool(client_factory)
        pool.ensure_capacity(1)
        with pytest.raises(PoolCapacityError):
            pool.take(2)

    @pytest.mark.parametrize("bad", [-1, -10])
    def test_negative_sizes_rejected(self, client_factory, bad):
        with pytest.raises(ValueError):
            ClientPool(client_factory, max_size=bad)
        with pytest.raises(ValueError):
            ClientPool(client_factory).add_clients(bad)

    @pytest.mark.asyncio
    async def test_reset_closes_and_empties(self, client_factory, created_clients):
        pool = ClientPool(client_factory)
        pool.ensure_capacity(3)

        await pool.reset()

        assert pool.size == 0
        assert all(c.closed for c in created_clients)

    @pytest.mark.asyncio
    async def test_reset_tolerates_clients_without_aclose(self):
        pool = ClientPool(object)
        pool.ensure_capacity(2)
        await pool.reset()
        assert pool.size == 0
