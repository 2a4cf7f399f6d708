from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/', include('authapi.urls')),
    path('api/categories/', include('categories.urls')),
    path('api/notes/', include('notes.urls')),
]
