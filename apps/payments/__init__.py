"""
Payments App - Payment completion for conference tickets.

A completed Payment settles all unpaid ticket purchases a user holds
in one conference. Card details are only validated for the payment
form, never stored.
"""
