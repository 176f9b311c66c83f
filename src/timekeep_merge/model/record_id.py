# SPDX-License-Identifier: MIT

import uuid

RecordId = str


def generate_record_id() -> RecordId:
    return str(uuid.uuid4())
