import unittest

from safemarkup import SanitizeError, Tag, emit_error, sanitize_css, sanitize_markup
from safemarkup.errors import _ERROR_SINK


class TestErrorCollection(unittest.TestCase):
    def test_errors_are_collected_in_order(self) -> None:
        errors: list[SanitizeError] = []
        out = sanitize_markup('<script>x</script><a href="javascript:x" onclick="y">z</a>', errors=errors)
        self.assertEqual(out, "&lt;script&gt;x&lt;/script&gt;<a>z</a>")
        self.assertEqual(
            [e.code for e in errors],
            ["tag-escaped", "tag-escaped", "unsafe-url", "attr-not-allowed"],
        )
        self.assertEqual(errors[0].tag, "script")
        self.assertEqual(errors[2].attr, "href")
        self.assertEqual(errors[3].message, "Unsafe attribute 'onclick' (not allowed)")

    def test_style_findings_carry_css_category(self) -> None:
        errors: list[SanitizeError] = []
        sanitize_markup('<p style="color: red; position: fixed">x</p>', errors=errors)
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].code, "css-property")
        self.assertEqual(errors[0].category, "css")
        self.assertEqual(errors[0].tag, "p")
        self.assertEqual(str(errors[0]), "(css) css-property: Dropped CSS property 'position'")

    def test_sanitize_css_collects_errors(self) -> None:
        errors: list[SanitizeError] = []
        self.assertEqual(sanitize_css("background: url(x) red; margin: evil", errors=errors), "background: red;")
        self.assertEqual([e.code for e in errors], ["style-url", "css-value"])

    def test_rejected_style_is_reported(self) -> None:
        errors: list[SanitizeError] = []
        self.assertEqual(sanitize_css("width: expression(alert(1))", errors=errors), "")
        self.assertEqual([e.code for e in errors], ["style-rejected"])

    def test_clean_input_has_no_findings(self) -> None:
        errors: list[SanitizeError] = []
        sanitize_markup('<p class="x">hello <b>world</b></p>', errors=errors)
        self.assertEqual(errors, [])

    def test_sink_is_reset_after_call(self) -> None:
        sanitize_markup("<script>", errors=[])
        self.assertIsNone(_ERROR_SINK.get())

    def test_emit_error_without_sink_is_noop(self) -> None:
        emit_error("x", message="ignored")
        self.assertIsNone(_ERROR_SINK.get())


class TestReportCallback(unittest.TestCase):
    def test_report_receives_messages_and_tokens(self) -> None:
        seen: list[tuple[str, object]] = []

        def report(msg: str, *, node: object | None = None) -> None:
            seen.append((msg, node))

        sanitize_markup(
            '<iframe></iframe><use xlink:href="http://x/#y"/><rect fill="url(http://x)"/>',
            report=report,
        )
        messages = [m for m, _ in seen]
        self.assertEqual(
            messages,
            [
                "Unsafe tag 'iframe' (escaped)",
                "Unsafe tag 'iframe' (escaped)",
                "Unsafe local reference in attribute 'xlink:href'",
                "Stripped non-local url() from attribute 'fill'",
            ],
        )
        assert isinstance(seen[0][1], Tag)
        self.assertEqual(seen[0][1].name, "iframe")

    def test_report_and_errors_together(self) -> None:
        seen: list[str] = []
        errors: list[SanitizeError] = []
        sanitize_css("position: fixed", report=lambda msg, *, node=None: seen.append(msg), errors=errors)
        self.assertEqual(seen, ["Dropped CSS property 'position'"])
        self.assertEqual(len(errors), 1)
