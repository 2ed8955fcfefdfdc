"""Tests for the diagnostic model."""

from tokenguard.model.diagnostic import Diagnostic, Severity


class TestDiagnostic:
    def test_flags(self):
        assert Diagnostic(rule="r", severity=Severity.ERROR, message="m").is_error
        assert Diagnostic(rule="r", severity=Severity.WARNING, message="m").is_warning

    def test_str_with_location(self):
        diag = Diagnostic(
            rule="r", severity=Severity.WARNING, message="m", start_offset=3, end_offset=5, line=2, column=4
        )
        assert str(diag) == "2:4: warning: m (r)"

    def test_str_document_level(self):
        assert str(Diagnostic(rule="catalog", severity=Severity.WARNING, message="m")) == "warning: m (catalog)"

    def test_to_dict_payload(self):
        diag = Diagnostic(rule="r", severity=Severity.ERROR, message="m", start_offset=1, end_offset=3)
        payload = diag.to_dict()
        assert payload["severity"] == "error"
        assert payload["startOffset"] == 1
        assert payload["endOffset"] == 3
        assert payload["message"] == "m"
