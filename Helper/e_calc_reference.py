# Create the reference file for euler_digits
# Output is "2." followed by the digits of e, wrapped at line_width
# characters per line, the same layout as the published e.1mil file.
# The digits come from mpmath at raised working precision and are
# truncated, never rounded.

import sys

from euler_digits import write_reference_file
from euler_digits.config import load_settings

# Set decimal places to at least the largest precision you want to check
decimal_places = 1000022
settings = load_settings()
line_width = settings.line_width
output = settings.reference_path

if len(sys.argv) > 1:
    decimal_places = int(sys.argv[1])
if len(sys.argv) > 2:
    output = sys.argv[2]

path = write_reference_file(output, decimal_places, line_width)
print(f"Wrote {decimal_places} decimal places of e to {path}")
