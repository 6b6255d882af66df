from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Job',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=255)),
                ('department', models.CharField(max_length=150)),
                ('location', models.CharField(max_length=150)),
                ('description', models.TextField()),
                ('requirements', models.TextField()),
                ('min_salary', models.PositiveIntegerField(blank=True, null=True)),
                ('max_salary', models.PositiveIntegerField(blank=True, null=True)),
                ('employment_type', models.CharField(choices=[('Full-time', 'Full-time'), ('Part-time', 'Part-time'), ('Contract', 'Contract'), ('Temporary', 'Temporary'), ('Internship', 'Internship')], default='Full-time', max_length=50)),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('active', 'Active'), ('on_hold', 'On Hold'), ('filled', 'Filled'), ('closed', 'Closed')], db_index=True, default='active', max_length=20)),
                ('hiring_manager', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='managed_jobs', to=settings.AUTH_USER_MODEL)),
                ('recruiter', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='assigned_jobs', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ('-created_at', '-updated_at'),
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Applicant',
            fields=[
                ('id', models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('first_name', models.CharField(max_length=150)),
                ('last_name', models.CharField(max_length=150)),
                ('email', models.EmailField(max_length=254)),
                ('phone_number', models.CharField(blank=True, max_length=30)),
                ('current_company', models.CharField(blank=True, max_length=255)),
                ('notice_period', models.CharField(blank=True, max_length=100)),
                ('total_experience', models.CharField(blank=True, max_length=100)),
                ('relevant_experience', models.CharField(blank=True, max_length=100)),
                ('current_ctc', models.CharField(blank=True, max_length=100)),
                ('expected_ctc', models.CharField(blank=True, max_length=100)),
                ('resume', models.TextField(blank=True)),
                ('status', models.CharField(choices=[('new', 'New'), ('screening', 'Screening'), ('screening_selected', 'Screening Selected'), ('screening_rejected', 'Screening Rejected'), ('technical_round', 'Technical Round'), ('technical_selected', 'Technical Selected'), ('technical_rejected', 'Technical Rejected'), ('hr_round', 'HR Round'), ('hr_selected', 'HR Selected'), ('hr_rejected', 'HR Rejected'), ('final_round', 'Final Round'), ('hired', 'Hired'), ('rejected', 'Rejected'), ('on_hold', 'On Hold')], db_index=True, default='new', max_length=30)),
                ('notes', models.TextField(blank=True)),
                ('job', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='applicants', to='recruitment.job')),
            ],
            options={
                'ordering': ('-created_at', '-updated_at'),
                'abstract': False,
            },
        ),
    ]
