"""RedisClient behaviour with and without a live connection."""

from notekeeper.core.redis_client import RedisClient


class BrokenRedis:
    async def setex(self, *args):
        raise ConnectionError("gone")

    async def exists(self, *args):
        raise ConnectionError("gone")


async def test_disconnected_client_is_a_no_op():
    client = RedisClient()

    assert client.is_connected is False
    assert await client.ping() is False
    assert await client.add_to_blacklist("abc", 60) is False
    assert await client.is_token_blacklisted("abc") is False


async def test_blacklist_keys(fake_redis):
    client = RedisClient()
    client.redis = fake_redis

    assert await client.add_to_blacklist("abc", 60) is True

    assert fake_redis.ttls["blacklist:abc"] == 60
    assert await client.is_token_blacklisted("abc") is True
    assert await client.is_token_blacklisted("other") is False


async def test_errors_are_logged_not_raised():
    client = RedisClient()
    client.redis = BrokenRedis()

    assert await client.set("k", "v", expire=10) is False
    assert await client.exists("k") is False
