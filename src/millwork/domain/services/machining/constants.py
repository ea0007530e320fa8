"""Machining constants."""

# Floating point slack when checking a tool circle against the face edges.
BOUNDS_TOLERANCE = 1e-6

# Minifix joints sit this far from the front and rear edges.
MINIFIX_CONNECTION_OFFSET = 34.0

# Standard ball-bearing slide lengths in mm, shortest first.
STANDARD_SLIDE_LENGTHS = (250.0, 300.0, 350.0, 400.0, 450.0, 500.0, 550.0)
# Slide must leave at least this much of the lateral free behind it.
SLIDE_REAR_CLEARANCE = 50.0

# Rough CNC time per operation, used for estimates in exports.
SECONDS_PER_OPERATION = 3
