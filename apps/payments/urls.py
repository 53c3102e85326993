from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'payments'

router = DefaultRouter()
router.register(r'', views.PaymentViewSet, basename='payment')

urlpatterns = [
    # GET    /api/payments/                                - List own payments
    # GET    /api/payments/{id}/                           - Payment details
    # GET    /api/payments/options/                        - Card expiry select options
    # POST   /api/payments/conferences/{conference_id}/pay/ - Pay unpaid tickets
    path('options/', views.payment_options, name='payment-options'),
    path('conferences/<uuid:conference_id>/pay/', views.pay_conference, name='pay'),

    path('', include(router.urls)),
]
