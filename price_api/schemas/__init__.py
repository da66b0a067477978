from .price import PriceResponse, ErrorResponse, MessageResponse, SymbolListResponse

__all__ = [
    "PriceResponse",
    "ErrorResponse",
    "MessageResponse",
    "SymbolListResponse",
]
