from .sender    import EciesHkdfKemSender, KemKey
from .recipient import EciesHkdfKemRecipient

__all__ = ["EciesHkdfKemSender", "EciesHkdfKemRecipient", "KemKey"]
