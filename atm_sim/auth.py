"""PIN authentication with a bounded number of attempts."""

import logging

from atm_sim.config import ATMConfig
from atm_sim.console import Console
from atm_sim.models.enums import AuthResult, PinStatus
from atm_sim.validation import check_pin_format

logger = logging.getLogger(__name__)


class Authenticator:
    """Verify a 4-digit PIN against the configured reference PIN.

    A blank line is reported but does not use up an attempt. A malformed
    PIN ("12a4", "123") and a wrong 4-digit PIN both use one up.

    Parameters
    ----------
    config : ATMConfig
        Supplies the reference PIN and the attempt limit.
    console : Console
        Source of PIN submissions and sink for status messages.
    """

    def __init__(self, config: ATMConfig, console: Console) -> None:
        self.config = config
        self.console = console
        self.failed_attempts = 0
        self.input_closed = False

    @property
    def attempts_remaining(self) -> int:
        return self.config.max_pin_attempts - self.failed_attempts

    def authenticate(self) -> AuthResult:
        """Prompt for the PIN until it matches or attempts run out."""
        while self.attempts_remaining > 0:
            line = self.console.read_line("Enter your 4-digit PIN: ")
            if line is None:
                logger.info("Input closed during authentication")
                self.input_closed = True
                return AuthResult.DENIED

            pin = line.strip()
            status = check_pin_format(pin)

            if status is PinStatus.EMPTY:
                self.console.write("PIN cannot be empty.")
                continue

            if status is PinStatus.FORMAT_ERROR:
                self.failed_attempts += 1
                self.console.write(
                    f"Invalid format. PIN must be exactly 4 digits. "
                    f"{self.attempts_remaining} attempt(s) remaining."
                )
                logger.info("Malformed PIN submitted (%d attempt(s) left)", self.attempts_remaining)
                continue

            if pin == self.config.reference_pin:
                self.console.write("PIN accepted. Welcome!")
                logger.info("Authentication granted after %d failed attempt(s)", self.failed_attempts)
                return AuthResult.GRANTED

            self.failed_attempts += 1
            self.console.write(f"Incorrect PIN. {self.attempts_remaining} attempt(s) remaining.")
            logger.info("Incorrect PIN submitted (%d attempt(s) left)", self.attempts_remaining)

        logger.warning("Authentication denied: %d failed attempts", self.failed_attempts)
        return AuthResult.DENIED
