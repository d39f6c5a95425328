"""
Constants shared by the annotation model and its validators.
"""

# Tolerance for probabilities and scores
TOLERANCE = 0.001

# A top meaning must score more than DISAMBIGUATION_FACTOR / len(meanings)
# to be considered clearly selected. Default for settings.disambiguation_factor.
DISAMBIGUATION_FACTOR = 1.5

# Language tag used when the language of a text is unknown
ROOT_LANGUAGE = ""
