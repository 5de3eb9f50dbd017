from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import tb.apps.common.model_fields
import tb.apps.plans.enums
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='TravelPlan',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('visibility', tb.apps.common.model_fields.LabeledEnumField(default='private', enum_class=tb.apps.plans.enums.PlanVisibility, max_length=32, verbose_name='Visibility')),
                ('created_datetime', models.DateTimeField(auto_now_add=True)),
                ('modified_datetime', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='owned_plans', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Travel Plan',
                'verbose_name_plural': 'Travel Plans',
                'ordering': ['-created_datetime'],
            },
        ),
    ]
