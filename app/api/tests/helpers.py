"""Request-building and response-reading shortcuts shared by the API tests."""


def equal_participants(*users):
  """Participants payload for an equal split across `users`."""
  return [{'user_id': u.pk} for u in users]


def balances_by_name(response):
  """Map display name to amount string from a group balances response."""
  return {b['display_name']: b['amount'] for b in response.json()['balances']}
