import re
from typing import TypeAlias

CitationKey: TypeAlias = str

# '@' sigil, then word chars, a dot, a four-digit year and an optional suffix letter
CITATION_PATTERN = re.compile(r"@(?P<key>\w+\.\d{4}\w?)")
