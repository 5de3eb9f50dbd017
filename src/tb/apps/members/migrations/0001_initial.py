from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import tb.apps.common.model_fields
import tb.apps.members.enums
import tb.apps.plans.enums
import uuid


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('plans', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='TripMember',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('uuid', models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ('role', tb.apps.common.model_fields.LabeledEnumField(default='viewer', enum_class=tb.apps.plans.enums.TripRole, max_length=32, verbose_name='Role')),
                ('status', tb.apps.common.model_fields.LabeledEnumField(default='joined', enum_class=tb.apps.members.enums.MembershipStatus, max_length=32, verbose_name='Status')),
                ('joined_datetime', models.DateTimeField(auto_now_add=True)),
                ('added_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='plan_members_added', to=settings.AUTH_USER_MODEL)),
                ('plan', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='members', to='plans.travelplan')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='plan_memberships', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Trip Member',
                'verbose_name_plural': 'Trip Members',
            },
        ),
        migrations.AddConstraint(
            model_name='tripmember',
            constraint=models.UniqueConstraint(fields=('plan', 'user'), name='tripmember_plan_user'),
        ),
    ]
