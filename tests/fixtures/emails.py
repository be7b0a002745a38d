"""
Sample raw messages for testing.

This module contains raw messages as strings, first line being the envelope:
- Minimal single-part message
- Plain text message with an mbox envelope
- Folded headers
- Multipart/alternative
- Nested multipart with quoted-printable and base64 parts
- Headers with no blank separator
- CRLF line endings
"""

# Smallest possible message: the envelope line doubles as a From header
MINIMAL_EML = "From: a@b.com\nTo: c@d.com\nSubject: hi\n\nHello world"

# Plain text message delivered with an mbox envelope
PLAIN_TEXT_EML = """From sender@example.com Wed Feb 12 10:30:00 2026
From: sender@example.com
To: recipient@example.com
Subject: Test Email
Message-ID: <test123@example.com>
Content-Type: text/plain; charset="utf-8"

Hello, this is a simple test email.

Thank you.
"""

# Folded Subject and Received headers
FOLDED_HEADERS_EML = """From relay@example.com Wed Feb 12 11:00:00 2026
Received: from mx.example.com (mx.example.com [192.0.2.1])
\tby relay.example.com with ESMTP id 4A2B
From: sender@example.com
Subject: A subject that was long enough
 to be folded onto a second line
Content-Type: text/plain

Body line.
"""

# Multipart/alternative with a plain text and an HTML part
MULTIPART_ALTERNATIVE_EML = """From newsletter@example.com Wed Feb 12 16:00:00 2026
From: newsletter@example.com
To: subscriber@example.com
Subject: Monthly Newsletter
MIME-Version: 1.0
Content-Type: multipart/alternative; boundary="boundary123"

--boundary123
Content-Type: text/plain; charset="utf-8"

Plain version.

--boundary123
Content-Type: text/html; charset="utf-8"

<p>HTML version.</p>

--boundary123--
"""

# multipart/mixed holding a multipart/alternative and a base64 attachment.
# The top-level boundary sits on a folded continuation line.
NESTED_MULTIPART_EML = """From sender@example.com Thu Feb 13 09:00:00 2026
From: Sender <sender@example.com>
To: recipient@example.com
Subject: Quarterly report
MIME-Version: 1.0
Content-Type: multipart/mixed;
\tboundary="outer-XYZ"

This is a multi-part message in MIME format.
--outer-XYZ
Content-Type: multipart/alternative; boundary=inner-ABC

--inner-ABC
Content-Type: text/plain; charset="utf-8"
Content-Transfer-Encoding: quoted-printable

Caf=C3=A9 report is =
ready.

--inner-ABC
Content-Type: text/html; charset="utf-8"
Content-Transfer-Encoding: base64

PHA+UmVwb3J0IHJlYWR5LjwvcD4=

--inner-ABC--

--outer-XYZ
Content-Type: application/pdf; name="report.pdf"
Content-Disposition: attachment; filename="report.pdf"
Content-Transfer-Encoding: base64

JVBERi0xLjQK

--outer-XYZ--
"""

# Two HTML parts: lookups must return the first one
DUPLICATE_HTML_EML = """From sender@example.com Thu Feb 13 10:00:00 2026
Subject: Two HTML parts
Content-Type: multipart/mixed; boundary=dup

--dup
Content-Type: text/html

<p>first</p>
--dup
Content-Type: text/html

<p>second</p>
--dup--
"""

# Single-part base64 body described by the top-level headers
BASE64_SINGLE_PART_EML = """From sender@example.com Thu Feb 13 11:00:00 2026
Subject: Encoded
Content-Type: text/plain; charset="utf-8"
Content-Transfer-Encoding: base64

SGVsbG8=
"""

# No blank line after the headers: everything is header, nothing is body
NO_SEPARATOR_EML = """From sender@example.com Thu Feb 13 12:00:00 2026
Subject: Headers only
Content-Type: text/plain"""

# CRLF line endings as handed over by some transports
CRLF_EML = (
    "From sender@example.com Thu Feb 13 13:00:00 2026\r\n"
    "Subject: Windows\r\n"
    "Content-Type: multipart/alternative; boundary=\"crlf\"\r\n"
    "\r\n"
    "--crlf\r\n"
    "Content-Type: text/plain\r\n"
    "\r\n"
    "Line one\r\n"
    "--crlf--\r\n"
)

# Dictionary mapping names to sample messages
SAMPLE_EMAILS = {
    "minimal": MINIMAL_EML,
    "plain_text": PLAIN_TEXT_EML,
    "folded_headers": FOLDED_HEADERS_EML,
    "multipart_alternative": MULTIPART_ALTERNATIVE_EML,
    "nested_multipart": NESTED_MULTIPART_EML,
    "duplicate_html": DUPLICATE_HTML_EML,
    "base64_single_part": BASE64_SINGLE_PART_EML,
    "no_separator": NO_SEPARATOR_EML,
    "crlf": CRLF_EML,
}
