#!/usr/bin/env python3
"""appconfig demo: print a few values from app-config.json beside the program"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from .application import get_app_config
from .config import config
from .platform_utils import print_platform_info


@dataclass
class ComplexSetting:
    setting1: str = ""
    setting2: str = ""


@dataclass
class SubObject:
    # "Int" and "Str" would shadow the builtins used in the annotations
    int_value: int = field(default=0, metadata={"key": "Int"})
    dec: Decimal = Decimal(0)
    str_value: str = field(default="", metadata={"key": "Str"})


@dataclass
class TestObject:
    some_value: int = 0
    sub_object: SubObject = field(default_factory=SubObject)


def main() -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    if config.DEBUG:
        print_platform_info()

    app_config = get_app_config()
    print(app_config.get_app_setting("Test.Abc", str))
    print(app_config.get_app_setting("DoubleSetting", float))
    print(app_config.get_connection_string("Default"))

    complex_setting = app_config.get_app_setting("ComplexSetting", ComplexSetting)
    print(complex_setting.setting1)
    print(complex_setting.setting2)

    test_object = app_config.get_object("TestObject", TestObject)
    print(test_object.some_value)
    print(test_object.sub_object.int_value)
    print(test_object.sub_object.dec)
    print(test_object.sub_object.str_value)

    missing_object = app_config.get_object("MissingObject", TestObject)
    print(f"MissingObject -> {missing_object}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
