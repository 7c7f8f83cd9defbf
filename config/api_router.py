from django.urls import include
from django.urls import path

app_name = "api"
urlpatterns = [
    path("", include("resto_dashboard.users.api.urls")),
]
