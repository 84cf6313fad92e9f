import random

import pytest

from zoogame import config as C
from zoogame.exceptions import InvalidSelectionError
from zoogame.shop import AnimalShop


@pytest.mark.parametrize("seed", [0, 1, 42, 1234])
def test_refresh_with_seed(seed):
    shop = AnimalShop(random.Random(seed))
    shop.refresh()
    assert C.SHOP_MIN_OFFERS <= len(shop.available) <= C.SHOP_MAX_OFFERS
    assert all(offer.price >= 100 for offer in shop.available)
    assert C.SHOP_MIN_REFRESH_DAYS <= shop.days_until_refresh <= C.SHOP_MAX_REFRESH_DAYS


def test_refresh_replaces_every_offer():
    shop = AnimalShop(random.Random(3))
    shop.refresh()
    before = {id(offer) for offer in shop.available}
    shop.refresh()
    assert before.isdisjoint(id(offer) for offer in shop.available)


def test_tick_counts_down_then_refreshes(high_rng):
    shop = AnimalShop(high_rng)
    shop.refresh()
    assert len(shop.available) == C.SHOP_MAX_OFFERS
    assert shop.days_until_refresh == 3
    stock = list(shop.available)

    assert not shop.tick()
    assert not shop.tick()
    assert shop.available == stock
    assert shop.tick()
    assert shop.available != stock
    assert shop.days_until_refresh == 3


def test_take_removes_offer(low_rng):
    shop = AnimalShop(low_rng)
    shop.refresh()
    first, second = shop.available[0], shop.available[1]
    assert shop.take(0) is first
    assert shop.available[0] is second
    with pytest.raises(InvalidSelectionError):
        shop.get(len(shop.available))
    with pytest.raises(InvalidSelectionError):
        shop.get(-1)
