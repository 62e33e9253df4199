"""
Script builders — turn validated tool arguments into AppleScript for Mail.app.

Every builder is a pure function returning script text. Arguments are
embedded as literals: strings through quote(), message ids unquoted since
Mail's ``id`` property is numeric. Optional account scoping is emitted as
an ``if name of acct is ...`` block only when an account is given.
"""

from __future__ import annotations

SEARCH_SCOPES: tuple[str, ...] = ("subject", "sender", "content", "all")

# Fields probed per search scope; "all" sticks to the cheap header fields
_SCOPE_FIELDS: dict[str, tuple[str, ...]] = {
  "subject": ("subject",),
  "sender": ("sender",),
  "content": ("content",),
  "all": ("subject", "sender"),
}


# ---------------------------------------------------------------------------
# Literal helpers
# ---------------------------------------------------------------------------


def quote(value: str) -> str:
  """Render value as a single-line AppleScript string literal.

  Line breaks become \\n / \\r escapes so no literal spans script lines.
  """
  escaped = (
    value.replace("\\", "\\\\")
    .replace('"', '\\"')
    .replace("\r", "\\r")
    .replace("\n", "\\n")
  )
  return f'"{escaped}"'


def _compact(script: str) -> str:
  """Drop blank lines left behind by omitted optional clauses.

  Safe because quote() never emits a line break inside a literal.
  """
  return "\n".join(line for line in script.split("\n") if line.strip())


def _account_scope(account: str | None) -> tuple[str, str]:
  """Opening/closing lines restricting an account loop to one display name."""
  if not account:
    return "", ""
  return f"if name of acct is {quote(account)} then", "end if"


def _find_message(message_id: str, action: str) -> str:
  """Loop over every mailbox, running action on the first message with this id.

  Lookups that fail in a mailbox are swallowed so the scan moves on.
  """
  return f"""
  repeat with acct in accounts
    repeat with mb in mailboxes of acct
      try
        set msg to first message of mb whose id is {message_id}
{action}
      end try
    end repeat
  end repeat"""


# ---------------------------------------------------------------------------
# Accounts & mailboxes
# ---------------------------------------------------------------------------


def build_get_accounts_script() -> str:
  """Each account with its mailbox count, one per line."""
  return _compact("""
tell application "Mail"
  set accountList to ""
  repeat with acct in accounts
    set accountList to accountList & name of acct & " (" & (count of mailboxes of acct) & " mailboxes)" & linefeed
  end repeat
  if accountList is "" then return "No email accounts found"
  return accountList
end tell""")


def build_get_mailboxes_script(account: str | None = None) -> str:
  if account:
    return _compact(f"""
tell application "Mail"
  try
    set acct to account {quote(account)}
    set mbList to ""
    repeat with mb in mailboxes of acct
      set unreadCount to unread count of mb
      set mbList to mbList & name of mb & " (" & unreadCount & " unread)" & linefeed
    end repeat
    if mbList is "" then return "No mailboxes found"
    return mbList
  on error
    return {quote("Account not found: " + account)}
  end try
end tell""")

  return _compact("""
tell application "Mail"
  set mbList to ""
  repeat with acct in accounts
    set mbList to mbList & "=== " & name of acct & " ===" & linefeed
    repeat with mb in mailboxes of acct
      set unreadCount to unread count of mb
      set mbList to mbList & "  " & name of mb & " (" & unreadCount & " unread)" & linefeed
    end repeat
  end repeat
  return mbList
end tell""")


def build_unread_count_script(account: str | None = None) -> str:
  scope_open, scope_close = _account_scope(account)
  return _compact(f"""
tell application "Mail"
  set countList to ""
  set grandTotal to 0
  repeat with acct in accounts
    {scope_open}
    set acctTotal to 0
    set acctList to ""
    repeat with mb in mailboxes of acct
      set unreadCount to unread count of mb
      if unreadCount > 0 then
        set acctList to acctList & "  " & name of mb & ": " & unreadCount & linefeed
        set acctTotal to acctTotal + unreadCount
      end if
    end repeat
    if acctTotal > 0 then
      set countList to countList & name of acct & " (" & acctTotal & " unread):" & linefeed & acctList & linefeed
      set grandTotal to grandTotal + acctTotal
    end if
    {scope_close}
  end repeat
  if countList is "" then return "No unread emails"
  return countList & "Grand Total: " & grandTotal & " unread"
end tell""")


# ---------------------------------------------------------------------------
# Message listing
# ---------------------------------------------------------------------------


def _build_listing_script(
  source: str,
  account: str | None,
  mailbox: str,
  limit: int,
  marker: str,
  empty_text: str,
) -> str:
  """Shared shape of the unread/recent listings.

  There is no "first N" query in Mail's dictionary, so the count check
  runs per message and the remainder is scanned without being added.
  """
  scope_open, scope_close = _account_scope(account)
  return _compact(f"""
tell application "Mail"
  set emailList to ""
  set emailCount to 0
  repeat with acct in accounts
    {scope_open}
    try
      set mb to mailbox {quote(mailbox)} of acct
      repeat with msg in {source}
        if emailCount < {limit} then
          set msgId to id of msg
          set msgSubject to subject of msg
          set msgSender to sender of msg
          set msgDate to date received of msg
{marker}
          set emailList to emailList & "ID: " & msgId & linefeed
          set emailList to emailList & "From: " & msgSender & linefeed
          set emailList to emailList & "Subject: " & msgSubject & linefeed
          set emailList to emailList & "Date: " & msgDate & linefeed & linefeed
          set emailCount to emailCount + 1
        end if
      end repeat
    end try
    {scope_close}
  end repeat
  if emailList is "" then return {quote(empty_text)}
  return emailList
end tell""")


def build_get_unread_script(account: str | None = None, mailbox: str = "INBOX", limit: int = 20) -> str:
  marker = '          set emailList to emailList & "[" & name of acct & "]" & linefeed'
  return _build_listing_script(
    "(messages of mb whose read status is false)",
    account,
    mailbox,
    limit,
    marker,
    "No unread emails found",
  )


def build_get_recent_script(account: str | None = None, mailbox: str = "INBOX", limit: int = 20) -> str:
  marker = """          set isRead to read status of msg
          set readMarker to ""
          if not isRead then set readMarker to "[UNREAD] "
          set emailList to emailList & readMarker & "[" & name of acct & "]" & linefeed"""
  return _build_listing_script("messages of mb", account, mailbox, limit, marker, "No emails found")


def build_get_email_script(email_id: str) -> str:
  action = """        set msgContent to content of msg
        set msgSubject to subject of msg
        set msgSender to sender of msg
        set msgDate to date received of msg
        return "From: " & msgSender & linefeed & "Date: " & msgDate & linefeed & "Subject: " & msgSubject & linefeed & linefeed & msgContent"""
  return _compact(f"""
tell application "Mail"{_find_message(email_id, action)}
  return {quote("Email not found with ID: " + email_id)}
end tell""")


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


def _search_probes(query: str, scope: str) -> str:
  """One guarded containment test per searched field, OR-ed into `matched`."""
  probes = []
  for field in _SCOPE_FIELDS[scope]:
    probes.append(f"""            try
              if ({field} of msg as text) contains {quote(query)} then set matched to true
            end try""")
  return "\n".join(probes)


def build_search_script(
  query: str,
  account: str | None = None,
  scope: str = "all",
  limit: int = 20,
) -> str:
  if scope not in _SCOPE_FIELDS:
    raise ValueError(f"Unknown search scope: {scope}")
  scope_open, scope_close = _account_scope(account)
  return _compact(f"""
tell application "Mail"
  set results to ""
  set resultCount to 0
  repeat with acct in accounts
    {scope_open}
    repeat with mb in mailboxes of acct
      try
        repeat with msg in messages of mb
          if resultCount < {limit} then
            set matched to false
{_search_probes(query, scope)}
            if matched then
              set msgId to id of msg
              set msgSubject to subject of msg
              set msgSender to sender of msg
              set msgDate to date received of msg
              set results to results & "ID: " & msgId & linefeed
              set results to results & "From: " & msgSender & linefeed
              set results to results & "Subject: " & msgSubject & linefeed
              set results to results & "Date: " & msgDate & linefeed
              set results to results & "Location: " & name of acct & " / " & name of mb & linefeed & linefeed
              set resultCount to resultCount + 1
            end if
          end if
        end repeat
      end try
    end repeat
    {scope_close}
  end repeat
  if results is "" then return {quote("No emails found matching: " + query)}
  return results
end tell""")


# ---------------------------------------------------------------------------
# Compose
# ---------------------------------------------------------------------------


def _recipient_lines(kind: str, addresses: list[str]) -> str:
  return "\n".join(
    f"    make new {kind} recipient at end of {kind} recipients with properties {{address:{quote(addr)}}}"
    for addr in addresses
  )


def build_send_script(
  to: list[str],
  subject: str,
  body: str,
  cc: list[str] | None = None,
  bcc: list[str] | None = None,
) -> str:
  return _compact(f"""
tell application "Mail"
  set newMessage to make new outgoing message with properties {{subject:{quote(subject)}, content:{quote(body)}, visible:true}}
  tell newMessage
{_recipient_lines("to", to)}
{_recipient_lines("cc", cc or [])}
{_recipient_lines("bcc", bcc or [])}
  end tell
  send newMessage
  return {quote("Email sent to " + ", ".join(to))}
end tell""")


def build_reply_script(email_id: str, body: str, reply_all: bool = False) -> str:
  reply_opts = "with opening window and reply to all" if reply_all else "with opening window"
  action = f"""        set replyMsg to reply msg {reply_opts}
        set content of replyMsg to {quote(body)} & return & return & content of replyMsg
        send replyMsg
        return {quote("Reply sent")}"""
  return _compact(f"""
tell application "Mail"{_find_message(email_id, action)}
  return "Email not found"
end tell""")


# ---------------------------------------------------------------------------
# Organize
# ---------------------------------------------------------------------------


def build_mark_all_read_script(account: str, mailbox: str) -> str:
  return _compact(f"""
tell application "Mail"
  try
    set acct to account {quote(account)}
    set mb to mailbox {quote(mailbox)} of acct
    set read status of (messages of mb whose read status is false) to true
    return {quote("Marked all emails as read in " + mailbox)}
  on error errMsg
    return "Error: " & errMsg
  end try
end tell""")


def _set_on_message(email_id: str, statement: str, done_text: str) -> str:
  action = f"""        {statement}
        return {quote(done_text)}"""
  return _compact(f"""
tell application "Mail"{_find_message(email_id, action)}
  return "Email not found"
end tell""")


def build_mark_read_script(email_id: str) -> str:
  return _set_on_message(email_id, "set read status of msg to true", "Marked as read")


def build_mark_unread_script(email_id: str) -> str:
  return _set_on_message(email_id, "set read status of msg to false", "Marked as unread")


def build_delete_script(email_id: str) -> str:
  return _set_on_message(email_id, "delete msg", "Email deleted")


def build_move_script(email_id: str, to_mailbox: str, to_account: str | None = None) -> str:
  """Resolve the destination first; bail out before touching the source message."""
  scope_open, scope_close = _account_scope(to_account)
  # Unscoped: first account holding the mailbox wins
  stop = "" if to_account else "exit repeat"
  action = f"""        move msg to destMb
        return {quote("Email moved to " + to_mailbox)}"""
  return _compact(f"""
tell application "Mail"
  set destMb to missing value
  repeat with acct in accounts
    {scope_open}
    try
      set destMb to mailbox {quote(to_mailbox)} of acct
      {stop}
    end try
    {scope_close}
  end repeat
  if destMb is missing value then return {quote("Mailbox not found: " + to_mailbox)}{_find_message(email_id, action)}
  return "Email not found"
end tell""")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


def build_open_script() -> str:
  return 'tell application "Mail" to activate'


def build_check_script() -> str:
  return 'tell application "Mail" to check for new mail'
