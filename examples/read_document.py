from __future__ import annotations

import ezjson

DOCUMENT = """
{
    "service": {"name": "billing", "replicas": 3, "ratio": 0.75},
    "owners": [{"team": "payments", "oncall": null}]
}
"""


def main() -> None:
    ezjson.configure_logging()
    doc = ezjson.decode_string(DOCUMENT)

    print("name:", ezjson.get_string(doc, "service", "name"))
    print("replicas:", ezjson.get_int(doc, "service", "replicas"))
    print("ratio:", ezjson.get_float(doc, "service", "ratio"))
    print("oncall:", repr(ezjson.get_string(doc, "owners", 0, "oncall")))

    try:
        ezjson.get_string(doc, ezjson.ERROR_ON_NULL, "owners", 0, "oncall")
    except ezjson.NullValueError as exc:
        print("strict:", exc)

    try:
        ezjson.get_int(doc, "owners", 1, "team")
    except ezjson.KeyLookupError as exc:
        print("missing:", exc)


if __name__ == "__main__":
    main()
