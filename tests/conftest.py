"""Test configuration and fixtures."""

import logfire

# Local-only, silent telemetry for the whole test session. Must run before
# invitelink.interface.api.app is imported, since it instruments on import.
logfire.configure(send_to_logfire=False, console=False)
