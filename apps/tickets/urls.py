from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'tickets'

router = DefaultRouter()
router.register(r'', views.TicketViewSet, basename='ticket')

urlpatterns = [
    # Ticket ViewSet routes
    # GET    /api/tickets/                - List tickets (?conference=<id>)
    # POST   /api/tickets/                - Create ticket (organizer)
    # GET    /api/tickets/{id}/           - Ticket details
    # PATCH  /api/tickets/{id}/           - Update ticket (organizer)
    # DELETE /api/tickets/{id}/           - Delete ticket and its purchases (organizer)
    # GET    /api/tickets/{id}/sales/     - Tickets sold and turnover (organizer)

    # Purchase endpoints
    path('conferences/<uuid:conference_id>/purchase/', views.purchase, name='purchase'),
    path('conferences/<uuid:conference_id>/my_purchases/', views.my_purchases, name='my-purchases'),

    # Include router URLs
    path('', include(router.urls)),
]
