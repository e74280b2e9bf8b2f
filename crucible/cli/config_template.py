"""
Configuration template for crucible searches
"""

CONFIG_TEMPLATE = """# Crucible search configuration
# ============================================================================

# Longest straight run allowed before the path must turn left or right
max_straight: 3

# Start cell as [row, col]; (0, 0) is the top-left corner
start: [0, 0]

# Target cell as [row, col]; leave null for the bottom-right corner
target: null

# Initial headings to search from (north, south, east, west).
# One independent search runs per heading; the cheapest result wins.
headings:
  - east
  - south

# Result export
output:
  formats: []        # Options: json, csv
  directory: null    # Defaults to the current directory

# Logging level: DEBUG, INFO, WARNING, ERROR
log_level: INFO
"""
