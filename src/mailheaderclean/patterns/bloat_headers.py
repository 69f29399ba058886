"""Built-in list of non-essential ("bloat") header fields.

Entries are exact header names or glob patterns where ``*`` matches any
run of characters. Matching is case-insensitive and anchored to the
whole field name, so ``X-MS-*`` removes ``X-MS-Exchange-Organization-SCL``
but leaves ``Y-X-MS-Foo`` alone.

Routing essentials (From, To, Cc, Subject, Date, Message-ID, threading
headers, MIME headers) are never listed. The first ``Received`` field is
kept by the filter engine itself and does not belong here.
"""

BUILTIN_REMOVAL_PATTERNS: tuple[str, ...] = (
    # Microsoft Exchange / Office365
    "X-MS-*",  # X-MS-Exchange-*, X-MS-Office365-*, X-MS-Has-Attach
    "X-Microsoft-*",  # X-Microsoft-Antispam*
    "X-Forefront-*",
    "X-ClientProxiedBy",
    "X-EOPAttributedMessage",
    "msip_labels",
    "Thread-Index",
    "Thread-Topic",
    "Deferred-Delivery",
    # ARC forwarding validation
    "ARC-*",
    "Authentication-Results*",  # also Authentication-Results-Original
    "auto-submitted",
    # Organization tracking
    "X-OriginatorOrg",
    "Organization",
    "X-Organization",
    "X-Country",
    # Client preferences
    "Accept-Language",
    "Content-Language",
    # Client software identification
    "X-Mailer",
    "User-Agent",
    "X-Mailer-Version",
    "X-MimeOLE",
    "X-MSMail-Priority",
    # Priority / importance
    "X-Priority",
    "Importance",
    "Priority",
    "Precedence",
    # Tracking and receipts
    "Disposition-Notification-To",
    "X-Confirm-Reading-To",
    "Return-Receipt-To",
    "X-Auto-Response-Suppress",
    # Security vendors
    "X-Proofpoint-*",
    "X-Mimecast-*",
    "X-IronPort-*",
    "X-Barracuda-*",
    "X-Sophos-*",
    "X-LASED-*",
    "X-Spampanel-*",
    "X-YourOrg-MailScanner*",
    "X-TM-AS-*",  # Trend Micro
    "X-Sonic*",  # X-SONIC-DKIM-SIGN, X-Sonic-ID, X-Sonic-MF
    "X-FireEye",
    "X-Amavis-Modified",
    "X-AntiAbuse",
    "X-Antivirus",
    "X-Antivirus-Status",
    "X-Virus-Scanned",
    # Mail providers
    "X-Google*",  # X-Google-*, X-GoogleForms-*
    "X-Gm-*",
    "X-Yahoo-*",
    "X-YMail-*",
    "X-AOL-*",
    # Mailing lists
    "List-*",
    "X-BeenThere",
    "X-Mailman-Version",
    # Sender tracking
    "X-Originating-IP",
    "X-Sender-IP",
    "X-Get-Message-Sender-Via",
    "X-Originating-Email",
    "X-Authenticated-Sender",
    "X-Sender",
    "X-IP",
    # Cloud security / filtering services
    "X-cloud-security*",
    "X-CMAE-*",
    "X-Greylist",
    # Tracking services
    "X-CodeTwo*",
    # Service provider / hosting metadata
    "X-AliDM-RcptTo",
    "X-Postal-MsgID",
    "X-PPE-TRUSTED",
    "X-PPP-*",
    "X-SECURESERVER-ACCT",
    "X-SG-EID",
    "X-RSMIdSession",
    # Message tracking / identification
    "X-Entity-ID",
    "X-EnvId",
    "X-Filter-ID",
    "X-MDID*",
    "Feedback-ID",
    "X-Forwarded-Encrypted",
    "X-Received",
    "X-Recommended-Action",
    "X-Report-Abuse-To",
    "X-Source*",  # X-Source, X-Source-Args, X-Source-Dir
    # Obsolete or rarely used RFC headers
    "Comments",
    "Keywords",
    "Resent-*",
    "Status",
    "X-Status",
    "X-UID",
    # Post-delivery metadata
    "Delivered-To",
    "Return-Path",
    "X-Original-To",
    # Authentication signatures
    "DKIM-Signature",
    "DKIM-Filter",
    "Received-SPF",
    # Spam filtering metadata
    "X-Spam-*",
)
