"""
Logical deletion filters.

Membership and grant tables carry `is_deleted`; every lookup of such a
table goes through `active` so removed rows never leak into results.
"""

from sqlalchemy import false, true
from sqlmodel import col


def active(model):
    return col(model.is_deleted) == false()


def deleted(model):
    return col(model.is_deleted) == true()
