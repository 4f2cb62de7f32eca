"""
Skills Module - Filtering of the fixed skill list
"""


def filter_skills(query, skills):
    """
    Return the skills containing the query, case-insensitively, in list order

    An empty query matches every skill.
    """
    needle = (query or '').lower()
    return [skill for skill in skills if needle in skill.lower()]
