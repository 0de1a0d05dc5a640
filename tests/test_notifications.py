import json

from src.unzip.notifications import UnzipNotification, new_transaction_id
from src.unzip.pipeline import UnzipJob

JOB = UnzipJob(
    source_blob_name="incoming/batch.zip",
    destination_folder="drop",
    correlation_id="corr-1",
    int_id="INT001",
    event_type="FileArrived",
    zip_file_name="batch.zip",
)


def test_transaction_id_format():
    tid = new_transaction_id()
    assert tid.startswith("TRANS")
    assert tid[5:] == tid[5:].upper()
    assert len(tid) == len("TRANS") + 36


def test_body_uses_pascal_case_keys():
    notification = JOB.notification_for("x.csv", "drop/x.csv")
    body = json.loads(notification.body())
    assert body == {
        "IntId": "INT001",
        "TransactionId": notification.transaction_id,
        "CorrelationId": "corr-1",
        "FileName": "x.csv",
        "ArchiveBlobFullPath": "incoming/batch.zip",
        "ZipFileName": "batch.zip",
        "EventType": "FileArrived",
        "UnzipBlobFullPath": "drop/x.csv",
    }


def test_application_properties_mirror_body_without_message_id():
    notification = JOB.notification_for("x.csv", "drop/x.csv")
    props = notification.application_properties()
    assert props == json.loads(notification.body())
    assert "message_id" not in props
    assert notification.message_id


def test_each_notification_gets_fresh_ids():
    first = JOB.notification_for("x.csv", "drop/x.csv")
    second = JOB.notification_for("x.csv", "drop/x.csv")
    assert first.transaction_id != second.transaction_id
    assert first.message_id != second.message_id
    assert first.transaction_id != JOB.correlation_id


def test_accepts_alias_names():
    notification = UnzipNotification(
        IntId="i",
        CorrelationId="c",
        FileName="f",
        ArchiveBlobFullPath="a",
        ZipFileName="z",
        EventType="e",
        UnzipBlobFullPath="u",
    )
    assert notification.unzip_blob_full_path == "u"
