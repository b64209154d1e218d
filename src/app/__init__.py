"""App: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: UserRecord, NormalizedList, RelationshipResult, snapshots
- use_cases/: casos de uso (análise de listas)
- services/: serviços puros (derivação, comparação de snapshots, amostragem)
- infra/: implementações concretas de IO (Firestore, OpenAI)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; ai resume; utils apoia.
"""
