from django.urls import path
from . import views

app_name = 'catalog'

urlpatterns = [
    # Stock lookup
    path('stock/', views.stock_lookup, name='stock-lookup'),

    # Medicine database, gated by the daily access code
    path('unlock/', views.unlock, name='unlock'),
    path('medicines/', views.list_medicines, name='medicine-list'),
    path('access-code/', views.access_code, name='access-code'),

    # News and alerts
    path('news/', views.list_news_alerts, name='news-list'),
]
