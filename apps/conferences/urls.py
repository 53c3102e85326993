from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'conferences'

router = DefaultRouter()
router.register(r'', views.ConferenceViewSet, basename='conference')

urlpatterns = [
    # GET    /api/conferences/         - List conferences
    # POST   /api/conferences/         - Create conference (caller becomes organizer)
    # GET    /api/conferences/{id}/    - Conference details
    # PATCH  /api/conferences/{id}/    - Update (organizer)
    # DELETE /api/conferences/{id}/    - Delete with tickets and purchases (organizer)
    path('', include(router.urls)),
]
