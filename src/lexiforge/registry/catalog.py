"""Compiled-in catalog of document templates."""

from typing import Tuple

from ..models.enums import BillingType, ClauseTag, DocType, RuleOperator
from ..models.template import ClauseDefinition, DocumentTemplate, VisibilityRule


RETAINER = DocumentTemplate(
    id=DocType.RETAINER,
    name="Retainer Agreement",
    description="Standard legal services engagement contract defining scope and fees.",
    required_fields=("client_name", "matter_description", "jurisdiction", "hourly_rate"),
    clauses=(
        ClauseDefinition(
            id="parties",
            title="Parties & Definitions",
            tag=ClauseTag.STANDARD,
            is_immutable=True,
            content=(
                'This Retainer Agreement ("Agreement") is entered into on {{effective_date}}, '
                'by and between {{firm_name}} ("Attorney"), located in {{jurisdiction}}, and '
                '{{client_name}} ("Client"), residing at {{client_address}}.'
            ),
            explanation="This section identifies who is signing the contract and where they are located.",
        ),
        ClauseDefinition(
            id="entity_authority",
            title="Authority of Signatory",
            tag=ClauseTag.OPTIONAL,
            condition="business_entity_client",
            content=(
                "The individual executing this Agreement on behalf of {{client_name}} represents "
                "that they are duly authorized to bind the entity to its terms."
            ),
            explanation="Confirms the person signing for a company actually has the power to commit it.",
        ),
        ClauseDefinition(
            id="ca_disclosure",
            title="California Business & Professions Code Disclosure",
            tag=ClauseTag.JURISDICTION,
            is_immutable=True,
            condition=VisibilityRule("jurisdiction", RuleOperator.CONTAINS, "california"),
            content=(
                "In accordance with California Business and Professions Code Section 6148, this "
                "Agreement discloses that Attorney maintains professional liability insurance. "
                "Client acknowledges receipt of this disclosure."
            ),
            explanation="Mandatory disclosure for attorneys practicing under California jurisdiction.",
        ),
        ClauseDefinition(
            id="scope",
            title="Scope of Representation",
            tag=ClauseTag.STANDARD,
            content=(
                "Attorney agrees to provide legal services to Client in connection with "
                "{{matter_description}}. Any additional services outside this scope will require "
                "a separate written agreement."
            ),
            explanation=(
                "Crucial for preventing 'scope creep'. It defines exactly what work the lawyer "
                "will and will not do."
            ),
        ),
        ClauseDefinition(
            id="billing_hourly",
            title="Fees & Payment Terms (Hourly)",
            tag=ClauseTag.BILLING,
            is_immutable=True,
            condition=VisibilityRule("billing_type", RuleOperator.EQUALS, BillingType.HOURLY),
            content=(
                "Client agrees to pay Attorney an hourly rate of ${{hourly_rate}} per hour. An "
                "initial retainer of ${{retainer_amount}} is due upon execution of this Agreement. "
                "Invoices will be issued monthly and are payable within 30 days."
            ),
            explanation="Standard hourly billing arrangement common in litigation and complex advisory.",
        ),
        ClauseDefinition(
            id="billing_flat",
            title="Fees & Payment Terms (Flat Fee)",
            tag=ClauseTag.BILLING,
            is_immutable=True,
            condition=VisibilityRule("billing_type", RuleOperator.EQUALS, BillingType.FLAT_FEE),
            content=(
                "Client agrees to pay Attorney a flat fee of ${{flat_fee_amount}} for the entirety "
                "of the services described in the Scope of Representation. This fee is earned upon "
                "receipt and will be deposited into the Firm's operating account."
            ),
            explanation="Fixed cost arrangement providing price certainty for the client.",
        ),
        ClauseDefinition(
            id="confidentiality",
            title="Confidentiality",
            tag=ClauseTag.STANDARD,
            is_immutable=True,
            content=(
                "Attorney shall maintain the confidentiality of all information provided by Client "
                "as required by the Rules of Professional Conduct in the State of {{jurisdiction}}."
            ),
            explanation="Protects your secrets and ensures the lawyer cannot disclose your private information.",
        ),
        ClauseDefinition(
            id="arbitration",
            title="Arbitration of Disputes",
            tag=ClauseTag.OPTIONAL,
            condition=VisibilityRule("include_arbitration_clause", RuleOperator.IS_TRUE),
            content=(
                "Any dispute, claim or controversy arising out of or relating to this Agreement "
                "shall be determined by arbitration in {{jurisdiction}} before one arbitrator. The "
                "parties shall equally share the costs of the arbitration."
            ),
            explanation="Requires parties to settle disputes outside of court, usually faster and more private.",
        ),
        ClauseDefinition(
            id="termination",
            title="Termination Clause",
            tag=ClauseTag.OPTIONAL,
            condition=VisibilityRule("include_termination_clause", RuleOperator.IS_TRUE),
            content=(
                "Either party may terminate this representation at any time upon written notice. "
                "Upon termination, Client shall pay all outstanding fees for services rendered "
                "through the date of termination."
            ),
            explanation="Explains how the professional relationship can be ended by either side.",
        ),
        ClauseDefinition(
            id="governing_law",
            title="Governing Law",
            tag=ClauseTag.STANDARD,
            is_immutable=True,
            content=(
                "This Agreement shall be governed by and construed in accordance with the laws of "
                "the State of {{jurisdiction}}."
            ),
            explanation="Determines which state's laws will apply if there is a dispute.",
        ),
        ClauseDefinition(
            id="signatures",
            title="Signature Block",
            tag=ClauseTag.STANDARD,
            is_immutable=True,
            content=(
                "IN WITNESS WHEREOF, the parties have executed this Agreement as of the date first "
                "above written.\n\n__________________________\n{{attorney_name}}, Attorney\n\n"
                "__________________________\n{{client_name}}, Client"
            ),
            explanation="The formal closing where both parties sign to make the document binding.",
        ),
    ),
)


END_OF_REPRESENTATION = DocumentTemplate(
    id=DocType.END_REP,
    name="End of Representation",
    description="Formal notification closing a legal matter and returning files.",
    required_fields=("client_name", "matter_description", "effective_date"),
    clauses=(
        ClauseDefinition(
            id="closing",
            title="Matter Closure",
            is_immutable=True,
            content=(
                "Dear {{client_name}},\n\nWe are writing to formally conclude our legal "
                "representation regarding {{matter_description}}, effective {{effective_date}}. "
                "Our work on this specific matter is now complete."
            ),
            explanation="Clearly marks the end of the attorney-client relationship for a specific case.",
        ),
        ClauseDefinition(
            id="files",
            title="File Disposition & Retention",
            is_immutable=True,
            content=(
                "We have enclosed your original documents and the final case file. We will "
                "maintain a digital copy for our records for the period required by "
                "{{jurisdiction}} law, typically seven years. After this period, the digital file "
                "will be destroyed without further notice."
            ),
            explanation="Important notice regarding how long the firm will keep your data.",
        ),
        ClauseDefinition(
            id="limitations",
            title="Statute of Limitations Notice",
            is_immutable=True,
            content=(
                'Please be advised that various legal claims are subject to time limits known as '
                '"Statutes of Limitations." Our closure of this file does not toll or extend any '
                'such periods. You are responsible for future deadlines.'
            ),
            explanation="A standard legal warning that you must still be aware of time limits for future actions.",
        ),
        ClauseDefinition(
            id="final_invoice",
            title="Final Financials",
            content=(
                "Your final statement is attached showing a zero balance or any final refund due. "
                "All fees have been processed according to our original agreement."
            ),
            explanation="Confirms that all financial obligations have been settled.",
        ),
    ),
)


COLLECTION_DEMAND = DocumentTemplate(
    id=DocType.COLLECTION,
    name="Collection Demand",
    description="Demand letter for outstanding debts and payment notifications.",
    required_fields=("client_name", "total_debt", "due_date"),
    clauses=(
        ClauseDefinition(
            id="demand",
            title="Formal Demand for Payment",
            is_immutable=True,
            content=(
                "RE: Formal Demand for Payment - ${{total_debt}}\n\nThis letter serves as a formal "
                "demand for payment of the outstanding balance of ${{total_debt}} owed to "
                "{{firm_name}} by {{client_name}} regarding {{matter_description}}. Payment must "
                "be received by {{due_date}}."
            ),
            explanation="A standard legal demand letter used to initiate debt recovery.",
        ),
        ClauseDefinition(
            id="instructions",
            title="Payment Instructions",
            content=(
                "Please remit payment via check payable to {{firm_name}} at the address listed "
                "above, or contact our office at {{client_email}} to arrange a wire transfer."
            ),
            explanation="Tells the recipient exactly how to pay the debt.",
        ),
        ClauseDefinition(
            id="fdcpa",
            title="FDCPA Validation Notice",
            is_immutable=True,
            content=(
                "Unless you, within thirty days after receipt of this notice, dispute the validity "
                "of the debt, or any portion thereof, the debt will be assumed to be valid by the "
                "debt collector."
            ),
            explanation="Regulatory notice required in many jurisdictions to protect consumer rights.",
        ),
        ClauseDefinition(
            id="legal_action",
            title="Notice of Potential Legal Action",
            content=(
                "If payment is not received by the deadline, we reserve the right to pursue all "
                "legal remedies available under the laws of {{jurisdiction}}, which may include "
                "the filing of a civil lawsuit."
            ),
            explanation="Sets a hard deadline and warns of potential litigation.",
        ),
    ),
)


FDD_REVIEW = DocumentTemplate(
    id=DocType.FDD_REVIEW,
    name="FDD Review Summary",
    description="Summary of Franchise Disclosure Document risks and key terms.",
    required_fields=("client_name", "jurisdiction", "retainer_amount"),
    clauses=(
        ClauseDefinition(
            id="overview",
            title="Executive Summary",
            is_immutable=True,
            content=(
                "Client: {{client_name}}\nDate of Review: {{effective_date}}\n\nThis document "
                "provides a legal summary of the Franchise Disclosure Document (FDD). This is a "
                "legal analysis and not a guarantee of financial performance."
            ),
            explanation="A high-level summary of the review process.",
        ),
        ClauseDefinition(
            id="fees",
            title="Key Financial Obligations",
            content=(
                "Initial Franchise Fee: ${{retainer_amount}}\nRoyalty: 6% of Gross Sales\n"
                "Ad Fund: 2% of Gross Sales\n\nNote: Fees are subject to the governing laws of "
                "{{jurisdiction}}."
            ),
            explanation="Itemizes the recurring costs of the franchise system.",
        ),
        ClauseDefinition(
            id="territory",
            title="Item 12: Territorial Rights",
            content=(
                "The FDD indicates a [Protected/Non-Protected] territory. You should verify the "
                "exact GPS coordinates or boundaries provided in Exhibit A of the Franchise "
                "Agreement."
            ),
            explanation="Determines if other franchisees can open near you.",
        ),
        ClauseDefinition(
            id="termination",
            title="Default and Termination",
            is_immutable=True,
            content=(
                'The Franchisor maintains broad rights to terminate for "Good Cause." '
                "Specifically, failure to meet sales quotas may lead to non-renewal of the license."
            ),
            explanation="Highlights the risks of losing your business license.",
        ),
        ClauseDefinition(
            id="risk",
            title="General Risk Assessment",
            content=(
                "We have identified specific concerns regarding the non-compete clauses and the "
                "territory protections as defined by the laws of {{jurisdiction}}. We recommend "
                "negotiating these terms."
            ),
            explanation="Highlights red flags for the potential franchisee.",
        ),
    ),
)


DOC_TEMPLATES: Tuple[DocumentTemplate, ...] = (
    RETAINER,
    END_OF_REPRESENTATION,
    COLLECTION_DEMAND,
    FDD_REVIEW,
)
