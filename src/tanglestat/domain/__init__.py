"""Domain layer: ledger model and exceptions."""
