import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("profiles", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Result",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("sample_id", models.CharField(max_length=64)),
                (
                    "result_type",
                    models.CharField(
                        choices=[
                            ("rtpcr", "RT-PCR"),
                            ("antigen", "Antigen"),
                            ("antibody", "Antibody"),
                            ("rtlamp", "RT-LAMP"),
                        ],
                        max_length=16,
                    ),
                ),
                ("result", models.CharField(blank=True, max_length=64, null=True)),
                ("activated_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("result_at", models.DateTimeField(blank=True, null=True)),
                (
                    "profile",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="results",
                        to="profiles.profile",
                    ),
                ),
            ],
            options={
                "db_table": "results_result",
                "indexes": [
                    models.Index(fields=["profile", "activated_at"], name="result_profile_activated_idx"),
                    models.Index(fields=["sample_id"], name="result_sample_id_idx"),
                ],
            },
        ),
    ]
