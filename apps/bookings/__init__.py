"""Bookings app package.

This app encapsulates the booking domain: the booking model, the
conflict checker and the admission service. Admission runs in a single
transaction that locks the spot row, and on PostgreSQL an exclusion
constraint rejects overlapping date ranges at insert time.
"""
