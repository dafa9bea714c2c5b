"""Typed models for canonical RudderStack events and AppsFlyer sink calls."""
