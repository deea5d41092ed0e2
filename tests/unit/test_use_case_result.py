"""
Tests for the use case result wrapper.
"""
from shared.application import UseCaseResult


class TestUseCaseResult:
    def test_ok_without_warnings(self):
        result = UseCaseResult.ok({'id': 1})

        assert result.success
        assert result.data == {'id': 1}
        assert result.warnings == []
        assert not result.has_warnings

    def test_ok_copies_warnings(self):
        warnings = ('Warning: Coupon code invalid.',)

        result = UseCaseResult.ok(None, warnings=warnings)

        assert result.warnings == ['Warning: Coupon code invalid.']
        assert result.has_warnings

    def test_only_success_path_is_exposed(self):
        assert not hasattr(UseCaseResult, 'fail')
        assert not hasattr(UseCaseResult, 'from_exception')
