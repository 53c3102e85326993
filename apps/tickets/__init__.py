"""
Tickets App - Conference ticket sales.

Tickets define what a conference sells (title, price, currency).
Ticket purchases record how many of each ticket a user wants and
whether the purchase has been paid.

Architecture:
- Models: Ticket, TicketPurchase
- Money: py-moneyed values built from integer minor units
- Services: purchase_tickets, mark_purchases_paid, total_price_across_tickets
- Views: RESTful API with ViewSets and function views
"""
