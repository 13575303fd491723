from .random_gen import SecureRandom, DeterministicRandom
from .framing    import Framing
from .hexfmt     import bytes_to_hex

__all__ = ["SecureRandom", "DeterministicRandom", "Framing", "bytes_to_hex"]
