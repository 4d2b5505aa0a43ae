from django.urls import path
from django.views.generic import TemplateView

urlpatterns = [
    path("", TemplateView.as_view(template_name="cssmenu/demo.html"), name="home"),
    path("registrations/", TemplateView.as_view(template_name="cssmenu/demo.html"), name="registrations"),
]
