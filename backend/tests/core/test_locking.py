import asyncio

import pytest

from splitledger.core.locking import RWLock


@pytest.mark.asyncio
async def test_readers_share_the_lock():
    lock = RWLock()
    async with lock.read():
        async with lock.read():
            assert lock.readers == 2
    assert lock.readers == 0


@pytest.mark.asyncio
async def test_writer_waits_for_readers():
    lock = RWLock()
    order = []

    async def writer():
        async with lock.write():
            order.append("write")

    async with lock.read():
        task = asyncio.create_task(writer())
        await asyncio.sleep(0.01)
        assert not lock.locked_for_write
        order.append("read")

    await task
    assert order == ["read", "write"]


@pytest.mark.asyncio
async def test_readers_wait_for_writer():
    lock = RWLock()
    order = []

    async def reader():
        async with lock.read():
            order.append("read")

    async with lock.write():
        task = asyncio.create_task(reader())
        await asyncio.sleep(0.01)
        assert lock.readers == 0
        order.append("write")

    await task
    assert order == ["write", "read"]


@pytest.mark.asyncio
async def test_cancelled_writer_does_not_block_readers():
    lock = RWLock()

    async def writer():
        async with lock.write():
            pass

    async with lock.read():
        task = asyncio.create_task(writer())
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    async with lock.read():
        assert lock.readers == 1
