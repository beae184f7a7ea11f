"""Domain layer for payerindex."""

# Services are imported lazily: utils depends on domain.errors, and the
# services depend on utils.
_SERVICES = {
    "PayerEventHandler": "payerindex.domain.payer",
    "HandleResult": "payerindex.domain.payer",
    "DebtService": "payerindex.domain.debt",
    "ReplayService": "payerindex.domain.replay",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        from importlib import import_module

        return getattr(import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
