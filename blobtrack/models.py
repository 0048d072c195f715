from sqlalchemy import BigInteger, Column, DateTime, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class BlobRow(Base):
    __tablename__ = "blobs"

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=False)
    commitment = Column(String)
    size = Column(BigInteger)
    height = Column(BigInteger, index=True)
    time = Column(DateTime(timezone=True))   # publish time, UTC
    signer = Column(String)
    content_type = Column(String)
    namespace_id = Column(String)            # namespace.namespace_id
    tx_id = Column(BigInteger)
    tx_height = Column(BigInteger)
    tx_position = Column(Integer)            # index of the tx inside its block
    tx_hash = Column(String)

    def __repr__(self) -> str:
        return f"BlobRow(id={self.id!r}, height={self.height!r}, tx_hash={self.tx_hash!r})"
