import unittest

from vial_render.config import VialConfig
from vial_render.labels import (
    Absent,
    Empty,
    KeyLabel,
    LayerSwitch,
    LayerTap,
    Number,
    Opaque,
    PlainCode,
    TapDance,
    classify_token,
    get_tap_dance_info,
    parse_tap_dance_index,
    resolve,
)


def make_config(tap_dance=None) -> VialConfig:
    return VialConfig(
        version=1,
        uid=1,
        layout=[],
        layout_options=0,
        vial_protocol=6,
        via_protocol=9,
        tap_dance=tap_dance or [],
    )


class TestClassifyToken(unittest.TestCase):
    def test_strings(self):
        self.assertEqual(classify_token("KC_A"), PlainCode("KC_A"))
        self.assertEqual(classify_token("TD(3)"), TapDance("TD(3)", 3))
        self.assertEqual(classify_token("LT1(KC_SPACE)"), LayerTap("LT1(KC_SPACE)"))
        self.assertEqual(classify_token("TO(0)"), LayerSwitch("TO(0)"))
        self.assertEqual(classify_token("MO(1)"), Opaque("MO(1)"))

    def test_numbers(self):
        self.assertEqual(classify_token(-1), Absent())
        self.assertEqual(classify_token(0), Number(0))
        self.assertEqual(classify_token(1.5), Number(1.5))

    def test_other_shapes(self):
        for token in (None, True, False, {"a": 1}, ["KC_A"]):
            with self.subTest(token=token):
                self.assertEqual(classify_token(token), Empty())

    def test_variants_are_distinct(self):
        self.assertNotEqual(LayerSwitch("TO(0)"), Opaque("TO(0)"))

    def test_keycode_prefix_wins(self):
        # Starts with KC_, so never treated as a layer-tap
        self.assertEqual(classify_token("KC_LT"), PlainCode("KC_LT"))


class TestParseTapDanceIndex(unittest.TestCase):
    def test_valid(self):
        self.assertEqual(parse_tap_dance_index("TD(0)"), 0)
        self.assertEqual(parse_tap_dance_index("TD(12)"), 12)

    def test_repeated_delimiters(self):
        self.assertEqual(parse_tap_dance_index("TD(4))"), 4)

    def test_missing_close_paren(self):
        self.assertEqual(parse_tap_dance_index("TD(1"), 1)

    def test_invalid(self):
        for token in ("TD()", "TD(x)", "TD(-1)", "TD( 1)", "TD(+1)", "TD(1_0)"):
            with self.subTest(token=token):
                self.assertIsNone(parse_tap_dance_index(token))


class TestResolvePlainCodes(unittest.TestCase):
    def setUp(self):
        self.config = make_config()

    def test_table_hit(self):
        self.assertEqual(resolve("KC_A", self.config), KeyLabel("A", None, False))
        self.assertEqual(resolve("KC_ENTER", self.config), KeyLabel("Enter"))

    def test_table_miss_strips_prefix(self):
        self.assertEqual(resolve("KC_F5", self.config), KeyLabel("F5"))
        self.assertEqual(resolve("KC_ESCAPE", self.config), KeyLabel("ESCAPE"))

    def test_no_key(self):
        label = resolve("KC_NO", self.config)
        self.assertEqual(label.main_text, "")
        self.assertFalse(label.is_special)


class TestResolveTapDance(unittest.TestCase):
    def test_tap_and_hold(self):
        config = make_config([["KC_Z", "KC_LALT", "KC_NO", "KC_NO", 200]])
        self.assertEqual(resolve("TD(0)", config), KeyLabel("Z", "LAlt", True))

    def test_reduced_table_fallback(self):
        config = make_config([["KC_SPACE", "KC_ENTER"]])
        self.assertEqual(resolve("TD(0)", config), KeyLabel("SPACE", "ENTER", True))

    def test_index_out_of_range(self):
        config = make_config([["KC_Z", "KC_LALT"]])
        self.assertEqual(resolve("TD(5)", config), KeyLabel("TD(5)", None, True))

    def test_no_tap_dances(self):
        self.assertEqual(resolve("TD(0)", make_config()), KeyLabel("TD(0)", None, True))

    def test_short_entry(self):
        config = make_config([["KC_Z"]])
        self.assertEqual(resolve("TD(0)", config), KeyLabel("TD(0)", None, True))

    def test_empty_hold_shows_placeholder(self):
        config = make_config([["KC_Z", "KC_NO", "KC_NO", "KC_NO", 200]])
        self.assertEqual(resolve("TD(0)", config), KeyLabel("TD(0)", None, True))

    def test_non_string_actions_are_blank(self):
        config = make_config([[5, "KC_LALT"]])
        self.assertEqual(resolve("TD(0)", config), KeyLabel("TD(0)", None, True))

    def test_placeholder_uses_parsed_index(self):
        config = make_config([["KC_NO", "KC_NO"]])
        self.assertEqual(resolve("TD(0))", config), KeyLabel("TD(0)", None, True))

    def test_unparseable_index(self):
        config = make_config([["KC_Z", "KC_LALT"]])
        self.assertEqual(resolve("TD(abc)", config), KeyLabel("TD(abc)", None, True))

    def test_get_tap_dance_info(self):
        config = make_config([["KC_TAB", "MO(3)"], ["KC_A"]])
        self.assertEqual(get_tap_dance_info(config, 0), ("Tab", "MO3"))
        self.assertIsNone(get_tap_dance_info(config, 1))
        self.assertIsNone(get_tap_dance_info(config, 2))


class TestResolveLayerTokens(unittest.TestCase):
    def setUp(self):
        self.config = make_config()

    def test_layer_tap(self):
        self.assertEqual(resolve("LT1(KC_SPACE)", self.config), KeyLabel("SPACE", "LT1", True))
        self.assertEqual(resolve("LT3(KC_TAB)", self.config), KeyLabel("TAB", "LT3", True))

    def test_layer_tap_without_keycode(self):
        self.assertEqual(resolve("LT1(MO(2))", self.config), KeyLabel("LT1(MO(2))", None, True))

    def test_layer_tap_with_too_many_parts(self):
        token = "LT1(KC_A)(KC_B)"
        self.assertEqual(resolve(token, self.config), KeyLabel(token, None, True))

    def test_layer_switch(self):
        self.assertEqual(resolve("TO(0)", self.config), KeyLabel("TO(0)", None, True))


class TestResolveOtherValues(unittest.TestCase):
    def setUp(self):
        self.config = make_config()

    def test_opaque_string(self):
        self.assertEqual(resolve("MO(1)", self.config), KeyLabel("MO(1)", None, False))
        self.assertEqual(resolve("", self.config), KeyLabel("", None, False))

    def test_absent_key(self):
        self.assertEqual(resolve(-1, self.config), KeyLabel("", None, False))

    def test_numbers(self):
        self.assertEqual(resolve(7, self.config), KeyLabel("7"))
        self.assertEqual(resolve(0, self.config), KeyLabel("0"))
        self.assertEqual(resolve(-2, self.config), KeyLabel("-2"))

    def test_other_shapes_are_blank(self):
        for token in (None, True, {"t": "A"}, ["KC_A"]):
            with self.subTest(token=token):
                self.assertEqual(resolve(token, self.config), KeyLabel(""))


if __name__ == "__main__":
    unittest.main()
