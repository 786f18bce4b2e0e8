from millionaire.economy.ledger.service import LedgerService

__all__ = ["LedgerService"]
