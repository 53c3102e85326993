"""
Conferences App - Events that tickets are sold for.

A conference is owned by a single organizer who defines its tickets
(see apps.tickets) and receives payments for them (see apps.payments).
"""
