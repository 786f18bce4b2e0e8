from millionaire.economy.ledger import LedgerService

__all__ = ["LedgerService"]
