import logging
from decimal import Decimal

from pool_ledger.core.config import Settings
from pool_ledger.core.logging import LOGGER_NAME, configure_logging
from pool_ledger.core.utils import CENTS, is_negligible, qround, to_decimal


class TestUtils:
    def test_qround_half_up(self) -> None:
        assert qround(Decimal("2.675")) == Decimal("2.68")
        assert qround(Decimal("-2.675")) == Decimal("-2.68")
        assert qround(Decimal("1.004")) == Decimal("1.00")

    def test_qround_has_no_negative_zero(self) -> None:
        assert str(qround(Decimal("-0.0033"))) == "0.00"
        assert str(qround(Decimal("-0.005"))) == "-0.01"

    def test_cents(self) -> None:
        assert CENTS == Decimal("0.01")

    def test_to_decimal(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(5) == Decimal("5")
        d = Decimal("1.5")
        assert to_decimal(d) is d

    def test_is_negligible(self) -> None:
        assert is_negligible(Decimal("0.009"))
        assert not is_negligible(Decimal("0.01"))
        assert not is_negligible(Decimal("-0.5"))
        assert is_negligible(Decimal("0.5"), tolerance=Decimal("1"))


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.CURRENCY_TOLERANCE == Decimal("0.01")
        assert s.LOG_LEVEL == "INFO"

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("POOL_LEDGER_CURRENCY_TOLERANCE", "0.05")
        monkeypatch.setenv("POOL_LEDGER_LOG_LEVEL", "DEBUG")

        s = Settings()
        assert s.CURRENCY_TOLERANCE == Decimal("0.05")
        assert s.LOG_LEVEL == "DEBUG"


class TestLogging:
    def test_configure_logging(self) -> None:
        logger = configure_logging("debug")

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        configure_logging("warning")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_package_loggers_hang_off_configured_logger(self) -> None:
        from pool_ledger.services import balance_service, settlement_service

        root = configure_logging()
        for module in (balance_service, settlement_service):
            assert module.logger.name.startswith(LOGGER_NAME + ".")
            assert not module.logger.handlers
            assert module.logger.getEffectiveLevel() == root.level
