from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static


urlpatterns = [
    # Admin site
    path('admin/', admin.site.urls),

    # Users app (authentication, profiles, parent accounts)
    path('users/', include('apps.users.urls', namespace='users')),

    # Academic app (students, teachers, classes, subjects)
    path('academics/', include('apps.academics.urls', namespace='academics')),

    # Assessment app (results, grades, report cards)
    path('assessment/', include('apps.assessment.urls', namespace='assessment')),

    # Finance app (fee records)
    path('finance/', include('apps.finance.urls', namespace='finance')),

    # Communication app (notices)
    path('communication/', include('apps.communication.urls', namespace='communication')),

    # Attendance app (attendance records)
    path('attendance/', include('apps.attendance.urls', namespace='attendance')),

    # Core app (public website, admin dashboard, website content)
    path('', include('apps.core.urls', namespace='core')),
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)

# Admin site customization
admin.site.site_header = 'CampusConnect Administration'
admin.site.site_title = 'CampusConnect Admin'
admin.site.index_title = 'Welcome to CampusConnect'
