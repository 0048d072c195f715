"""Shapes of the records returned by the Celenium blobs endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# Column ranges of the blobs table: BIGINT and INTEGER.
BigInt = Annotated[int, Field(ge=0, lt=2**63)]
SmallInt = Annotated[int, Field(ge=0, lt=2**31)]


class NamespaceRef(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    namespace_id: str


class BlobTx(BaseModel):
    """Transaction that carried the blob."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: BigInt
    height: BigInt
    position: SmallInt
    hash: str


class Blob(BaseModel):
    """One blob published by the rollup."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: BigInt
    commitment: str
    size: BigInt
    height: BigInt
    time: datetime
    signer: str
    content_type: str
    namespace: NamespaceRef
    tx: BlobTx

    def to_row(self) -> dict[str, Any]:
        """Flatten the nested namespace and tx into ``blobs`` table columns."""

        return {
            "id": self.id,
            "commitment": self.commitment,
            "size": self.size,
            "height": self.height,
            "time": self.time,
            "signer": self.signer,
            "content_type": self.content_type,
            "namespace_id": self.namespace.namespace_id,
            "tx_id": self.tx.id,
            "tx_height": self.tx.height,
            "tx_position": self.tx.position,
            "tx_hash": self.tx.hash,
        }


BlobList = TypeAdapter(list[Blob])
