"""
Funds transfer — доменный сервис перевода средств между счетами.

Ядро: проверка перевода (баланс, дневной лимит, лимит на операцию),
атомарное изменение балансов и запись истории движения средств.
Хранилища счетов и истории являются внешними коллабораторами (см. core.contracts).
"""
