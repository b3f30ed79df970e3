from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # POST /users        - register a staff account
    # POST /users/login  - obtain a JWT carrying the role claim
    path('users', views.register, name='register'),
    path('users/login', views.login, name='login'),
]
