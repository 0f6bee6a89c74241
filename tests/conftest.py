import pytest

import ezjson
from ezjson.testing import ezjson_config  # noqa: F401

TEST_DATA = """
{
    "data": {
        "subData": {
            "array": [
                {
                    "str": "a string",
                    "int": 42
                },
                "string in array",
                12.34,
                true
            ],
            "bool": false
        },
        "int": 123,
        "str": "string in data"
    },
    "moreData": {
        "str": "string in moreData"
    },
    "nothing": null,
    "array": [
        1,
        2,
        3
    ]
}
"""


@pytest.fixture()
def doc(ezjson_config) -> ezjson.JsonValue:
    return ezjson.decode_string(TEST_DATA)
