"""Pydantic models for Helius Enhanced Transaction API responses."""

from pydantic import BaseModel


class HeliusNativeTransfer(BaseModel):
    """SOL native transfer within a transaction."""

    from_user_account: str = ""
    to_user_account: str = ""
    amount: int = 0  # lamports


class HeliusTransaction(BaseModel):
    """Enhanced parsed transaction from Helius."""

    signature: str = ""
    type: str = ""  # "TRANSFER", "SWAP", ...
    source: str = ""
    timestamp: int = 0  # unix
    native_transfers: list[HeliusNativeTransfer] = []

    @property
    def first_native_transfer(self) -> HeliusNativeTransfer | None:
        return self.native_transfers[0] if self.native_transfers else None
