from indicacoes.contracts.payloads import (
    ActionFailure,
    ActionSuccess,
    ComprovanteOut,
    LeadOut,
    StatusOptionOut,
)

__all__ = [
    "ActionFailure",
    "ActionSuccess",
    "ComprovanteOut",
    "LeadOut",
    "StatusOptionOut",
]
