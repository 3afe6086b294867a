"""
Loan notifications.

Design Patterns & Strategies Used:
1. Observer Pattern - UserObserver instances subscribe to the NotificationManager
2. Registry - observers are indexed by user id so delivery is a direct lookup

Delivery is synchronous: notifying an observer appends to its own log, which
stands in for sending an email.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Observer(ABC):
    """Observer interface for loan notifications"""

    user_id: str

    @abstractmethod
    def notify(self, message: str):
        pass


class UserObserver(Observer):
    """Concrete Observer - collects the messages addressed to one user"""

    def __init__(self, user_id: str, email: str,
                 clock: Callable[[], datetime] = datetime.now):
        self.user_id = user_id
        self.email = email
        self._clock = clock
        self._notifications: List[str] = []

    @property
    def notifications(self) -> List[str]:
        return list(self._notifications)

    def notify(self, message: str):
        stamp = self._clock().strftime(TIMESTAMP_FORMAT)
        delivered = f"[{stamp}] Email sent to {self.email}: {message}"
        self._notifications.append(delivered)
        logger.info("Notification: %s", delivered)

    def __str__(self):
        return f"UserObserver(id={self.user_id}, email={self.email})"


class NotificationManager:
    """Subject for Observer Pattern - keeps subscribers and a dispatch history"""

    def __init__(self):
        self._observers: Dict[str, List[Observer]] = {}
        self._history: List[str] = []

    def subscribe(self, observer: Observer):
        """Attach an observer; subscribing twice has no effect"""
        observers = self._observers.setdefault(observer.user_id, [])
        if observer not in observers:
            observers.append(observer)

    def unsubscribe(self, observer: Observer):
        """Detach an observer if it is subscribed"""
        observers = self._observers.get(observer.user_id, [])
        if observer in observers:
            observers.remove(observer)
            if not observers:
                del self._observers[observer.user_id]

    def observers_for(self, user_id: str) -> List[Observer]:
        return list(self._observers.get(user_id, []))

    def notify_overdue(self, user_id: str, book_title: str, days_late: int):
        """Record an overdue event and tell the user"""
        self._history.append(
            f"OVERDUE: user {user_id} is {days_late} day(s) late returning '{book_title}'"
        )
        self._deliver(
            user_id,
            f"You are {days_late} day(s) late returning '{book_title}'. "
            f"Please return it as soon as possible."
        )

    def notify_reminder(self, user_id: str, book_title: str, days_remaining: int):
        """Record a due-soon reminder and tell the user"""
        self._history.append(
            f"REMINDER: user {user_id} must return '{book_title}' within {days_remaining} day(s)"
        )
        self._deliver(
            user_id,
            f"Reminder: please return '{book_title}' within {days_remaining} day(s)."
        )

    def _deliver(self, user_id: str, message: str):
        for observer in self.observers_for(user_id):
            observer.notify(message)

    def history(self) -> List[str]:
        return list(self._history)

    def subscriber_count(self) -> int:
        return sum(len(observers) for observers in self._observers.values())

    def __str__(self):
        return f"NotificationManager(observers={self.subscriber_count()}, notifications={len(self._history)})"
