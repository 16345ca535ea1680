from collections.abc import Callable

import pytest

from abidecode.decoding.codec import to_word


@pytest.fixture
def payload() -> Callable[..., str]:
    """Build a 0x payload from ints (encoded as words) and raw 64-char hex words."""

    def build(*items: int | str) -> str:
        return "0x" + "".join(to_word(i) if isinstance(i, int) else i for i in items)

    return build
