from .datatypes import SymbolSequence
from .datatypes import to_symbols

from .lcp import build_lcp_array

from .radix import radix_pass

from .suffix_array import build_rank_array
from .suffix_array import build_suffix_array

from .utils import AttributeDict
from .utils import InvalidInputError
from .utils import setup_logger
from .utils import str2bool

__version__ = "0.1.0"
