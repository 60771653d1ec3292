import dataclasses
import unittest

from safemarkup import DEFAULT_POLICY, SanitizationPolicy, sanitize_markup


class TestSanitizationPolicy(unittest.TestCase):
    def test_default_tables(self) -> None:
        assert "a" in DEFAULT_POLICY.allowed_elements
        assert "mfrac" in DEFAULT_POLICY.allowed_elements
        assert "clipPath" in DEFAULT_POLICY.allowed_elements
        assert "script" not in DEFAULT_POLICY.allowed_elements
        assert "viewBox" in DEFAULT_POLICY.allowed_attributes
        assert "xlink:href" in DEFAULT_POLICY.allowed_attributes
        assert "onclick" not in DEFAULT_POLICY.allowed_attributes
        assert "javascript" not in DEFAULT_POLICY.allowed_protocols
        assert "https" in DEFAULT_POLICY.allowed_protocols
        assert "use" in DEFAULT_POLICY.svg_allow_local_href
        assert "fill" in DEFAULT_POLICY.svg_attr_val_allows_ref
        assert "br" in DEFAULT_POLICY.void_elements
        self.assertEqual(DEFAULT_POLICY.max_style_length, 4096)

    def test_collections_are_normalized_to_frozensets(self) -> None:
        policy = SanitizationPolicy(allowed_protocols=["http", "https"], void_elements=("br",))
        self.assertIsInstance(policy.allowed_protocols, frozenset)
        self.assertEqual(policy.allowed_protocols, frozenset({"http", "https"}))
        self.assertEqual(policy.void_elements, frozenset({"br"}))
        for f in dataclasses.fields(DEFAULT_POLICY):
            if f.name != "max_style_length":
                self.assertIsInstance(getattr(DEFAULT_POLICY, f.name), frozenset)

    def test_policy_is_frozen(self) -> None:
        with self.assertRaises(dataclasses.FrozenInstanceError):
            DEFAULT_POLICY.allowed_protocols = frozenset()  # type: ignore[misc]

    def test_plain_string_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            SanitizationPolicy(allowed_protocols="http")

    def test_max_style_length_is_validated(self) -> None:
        with self.assertRaises(ValueError):
            SanitizationPolicy(max_style_length=0)
        with self.assertRaises(TypeError):
            SanitizationPolicy(max_style_length="10")  # type: ignore[arg-type]

    def test_replace_overrides_one_table(self) -> None:
        policy = dataclasses.replace(DEFAULT_POLICY, void_elements=set())
        self.assertEqual(sanitize_markup("<br>", policy), "<br>")
        self.assertEqual(policy.allowed_elements, DEFAULT_POLICY.allowed_elements)

    def test_custom_local_href_elements(self) -> None:
        policy = dataclasses.replace(DEFAULT_POLICY, svg_allow_local_href={"a"})
        self.assertEqual(sanitize_markup('<a xlink:href="http://x/">x</a>', policy), "<a>x</a>")

    def test_custom_uri_attributes(self) -> None:
        policy = dataclasses.replace(DEFAULT_POLICY, uri_attributes={"title"})
        self.assertEqual(sanitize_markup('<a title="javascript:x">t</a>', policy), "<a>t</a>")
        self.assertEqual(
            sanitize_markup('<a href="javascript:x">t</a>', policy),
            '<a href="javascript:x">t</a>',
        )
