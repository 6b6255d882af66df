from django.contrib import admin

from .models import Job, Applicant


@admin.register(Job)
class JobAdmin(admin.ModelAdmin):
    search_fields = ('title', 'department', 'location')
    list_display = ('title', 'department', 'status', 'hiring_manager', 'recruiter', 'created_at')
    list_filter = ('status', 'employment_type', 'department')


@admin.register(Applicant)
class ApplicantAdmin(admin.ModelAdmin):
    search_fields = ('first_name', 'last_name', 'email')
    list_display = ('full_name', 'email', 'job', 'status', 'created_at')
    list_filter = ('status',)
    readonly_fields = ('status',)
