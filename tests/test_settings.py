from appconfig.core.settings import AppSetting, SettingKind


def test_scalar_setting():
    setting = AppSetting.from_json("Retries", 3)

    assert setting.kind is SettingKind.SCALAR
    assert not setting.is_nested
    assert setting.raw() == 3


def test_nested_setting_keeps_private_copy():
    tree = {"Hosts": ["a", "b"]}
    setting = AppSetting.from_json("Cluster", tree)
    tree["Hosts"].append("c")

    raw = setting.raw()
    raw["Hosts"].append("d")

    assert setting.kind is SettingKind.NESTED
    assert setting.value == {"Hosts": ["a", "b"]}


def test_arrays_are_nested_settings():
    assert AppSetting.from_json("Ports", [80, 443]).kind is SettingKind.NESTED
