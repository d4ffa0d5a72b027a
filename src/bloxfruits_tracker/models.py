from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Fruit:
    name: str
    price: int
    on_sale: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "Fruit":
        return cls(
            name=str(data.get('name') or ""),
            price=int(data.get('price') or 0),
            on_sale=bool(data.get('onSale', False)),
        )


@dataclass(frozen=True)
class StockServer:
    session_id: str
    player_name: str
    server_id: str
    normal_stock: List[Fruit] = field(default_factory=list)
    mirage_stock: List[Fruit] = field(default_factory=list)
    created_at: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> "StockServer":
        created_at = data.get('createdAt')
        return cls(
            session_id=str(data.get('sessionId', "")),
            player_name=str(data.get('playerName', "")),
            server_id=str(data.get('serverId', "")),
            normal_stock=[Fruit.from_dict(f) for f in data.get('normalStock') or []],
            mirage_stock=[Fruit.from_dict(f) for f in data.get('mirageStock') or []],
            created_at=int(created_at) if created_at is not None else None,
        )

    def stock(self, kind: str) -> List[Fruit]:
        return self.normal_stock if kind == 'normal' else self.mirage_stock
