import pytest

HELLO = {'hello': 'world'}
HELLO_ZSTD = '1KLUv/QBoiQAAeyJoZWxsbyI6IndvcmxkIn0='
HELLO_LEGACY = '0KLUv/QBoiQAAeyJoZWxsbyI6IndvcmxkIn0='
HELLO_IDENTITY = '2eyJoZWxsbyI6IndvcmxkIn0='

VALUES = [
    None,
    True,
    False,
    0,
    -42,
    2**53,
    1.5,
    '',
    'hello',
    'ünïcödé ✓ 雪',
    [],
    {},
    [1, 'two', 3.0, None, [False]],
    {'nested': {'list': [1, 2, {'deep': 'value'}], 'empty': {}}},
    {'repeated': ['abcdefgh' * 4] * 64},
    list(range(500)),
]


@pytest.fixture(params=VALUES, ids=lambda v: type(v).__name__)
def value(request):
    return request.param


@pytest.fixture
def compressible():
    return {'repeated': ['abcdefgh' * 4] * 64}
